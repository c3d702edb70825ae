# chunking/recursive.py

import logging
from collections.abc import Sequence

from langchain_text_splitters import RecursiveCharacterTextSplitter

from adoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextSplitter

logger = logging.getLogger(__name__)

# Paragraph, line, sentence, word, then single characters as a last resort.
DEFAULT_SEPARATORS: tuple[str, ...] = ("\n\n", "\n", ". ", " ", "")


class RecursiveSplitter(TextSplitter):
    """
    Recursive separator-based splitter.

    This is a thin wrapper around langchain's RecursiveCharacterTextSplitter:
    - lengths are counted in characters
    - separators are tried coarsest first
    - sentence separators stay attached to the sentence they end
    """

    name = "recursive"

    def __init__(
        self,
        chunk_size: int,
        chunk_overlap: int = 0,
        separators: Sequence[str] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap must be >= 0")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.separators = tuple(separators or DEFAULT_SEPARATORS)
        self.metrics_hook = metrics_hook
        self._splitter = RecursiveCharacterTextSplitter(
            separators=list(self.separators),
            keep_separator="end",
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            length_function=len,
        )
        logger.debug(
            "Initialized RecursiveSplitter with chunk_size=%s, chunk_overlap=%s",
            chunk_size,
            chunk_overlap,
        )

    def split_text(self, text: str) -> list[str]:
        return self._splitter.split_text(text)
