# chunking/base.py

from abc import ABC, abstractmethod
from collections.abc import Iterable
from time import monotonic

from adoc_kit.observability import names
from adoc_kit.observability.base import MetricsHook

from .models import Chunk, Document


class DocumentSplitter(ABC):
    metrics_hook: MetricsHook

    @abstractmethod
    def split(self, document: Document) -> list[Chunk]:
        """
        Split one document into ordered chunks.

        Requirements:
        - Deterministic output for same input
        - Document order is preserved
        - Every chunk owns its metadata dict
        """
        raise NotImplementedError

    def split_many(self, documents: Iterable[Document]) -> list[Chunk]:
        """Concatenate the chunks of each document, in document order."""
        chunks: list[Chunk] = []
        for document in documents:
            chunks.extend(self.split(document))
        return chunks


class TextSplitter(DocumentSplitter):
    """
    Bounded, overlapping splitter over plain text.

    Pieces are at most `chunk_size` characters and consecutive pieces share
    up to `chunk_overlap` characters. Implementations must be stateless so a
    single instance can be shared between callers.
    """

    name: str
    chunk_size: int
    chunk_overlap: int

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        raise NotImplementedError

    def split(self, document: Document) -> list[Chunk]:
        start = monotonic()
        chunks = [
            Chunk(text=piece, metadata=dict(document.metadata))
            for piece in self.split_text(document.text)
        ]

        elapsed_ms = 1000 * (monotonic() - start)
        labels = {"splitter": self.name}
        self.metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(names.CHUNKING_DOCUMENTS_TOTAL, labels=labels)
        self.metrics_hook.increment(
            names.CHUNKING_CHUNKS_CREATED, len(chunks), labels=labels
        )
        return chunks
