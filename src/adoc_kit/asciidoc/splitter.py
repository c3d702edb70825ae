# asciidoc/splitter.py

import logging
from collections.abc import Mapping
from time import monotonic
from typing import Any

from adoc_kit.chunking.base import DocumentSplitter, TextSplitter
from adoc_kit.chunking.models import Chunk, Document
from adoc_kit.chunking.recursive import RecursiveSplitter
from adoc_kit.observability import names
from adoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .headers import DEFAULT_MAX_DEPTH, parse_headers
from .merging import merge_small_sections
from .metadata import enrich_metadata
from .overlap import add_cross_section_overlap
from .sections import Section, build_sections

logger = logging.getLogger(__name__)


class AsciiDocSemanticSplitter(DocumentSplitter):
    """
    Splits AsciiDoc documents along their section headers.

    - sections are cut at `=` header lines and labelled with their header path
    - undersized neighbours are merged, oversized sections are handed to the
      bounded `fallback` splitter
    - documents without section content go to `fallback` whole

    Instances are immutable; sharing one between threads is safe as long as
    the fallback splitter is stateless.
    """

    name = "asciidoc"

    def __init__(
        self,
        max_chunk_size: int,
        chunk_overlap: int = 0,
        *,
        fallback: TextSplitter | None = None,
        cross_section_overlap: bool = False,
        max_header_depth: int = DEFAULT_MAX_DEPTH,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_chunk_size <= 0:
            raise ValueError("max_chunk_size must be > 0")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap must be >= 0")
        if chunk_overlap > max_chunk_size:
            raise ValueError("chunk_overlap must be <= max_chunk_size")
        if max_header_depth < 1:
            raise ValueError("max_header_depth must be >= 1")

        self.max_chunk_size = max_chunk_size
        self.chunk_overlap = chunk_overlap
        self.cross_section_overlap = cross_section_overlap
        self.max_header_depth = max_header_depth
        self.metrics_hook = metrics_hook
        self.fallback = fallback or RecursiveSplitter(
            max_chunk_size, chunk_overlap, metrics_hook=metrics_hook
        )
        logger.info(
            "Initialized AsciiDocSemanticSplitter with max_chunk_size=%s, "
            "chunk_overlap=%s, fallback=%s",
            max_chunk_size,
            chunk_overlap,
            self.fallback.name,
        )

    def split(self, document: Document) -> list[Chunk]:
        start = monotonic()
        labels = {"splitter": self.name}

        headers = parse_headers(document.text, self.max_header_depth)
        sections = build_sections(document.text, headers)

        if not sections:
            if headers:
                logger.warning(
                    "Found %d headers but no section content, splitting as plain text",
                    len(headers),
                )
            else:
                logger.debug("No headers found, splitting as plain text")
            chunks = self._split_plain(document)
            self.metrics_hook.increment(names.CHUNKING_FALLBACK_TOTAL, labels=labels)
        else:
            merged = merge_small_sections(sections, self.max_chunk_size)
            logger.debug(
                "Parsed %d headers into %d sections, %d after merging",
                len(headers),
                len(sections),
                len(merged),
            )
            groups = [self._emit(section, document.metadata) for section in merged]
            chunks = add_cross_section_overlap(
                groups,
                overlap=self.chunk_overlap,
                max_chunk_size=self.max_chunk_size,
                enabled=self.cross_section_overlap,
            )
            self.metrics_hook.increment(
                names.CHUNKING_SECTIONS_PARSED, len(sections), labels=labels
            )
            self.metrics_hook.increment(
                names.CHUNKING_SECTIONS_MERGED,
                len(sections) - len(merged),
                labels=labels,
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(names.CHUNKING_DOCUMENTS_TOTAL, labels=labels)
        self.metrics_hook.increment(
            names.CHUNKING_CHUNKS_CREATED, len(chunks), labels=labels
        )
        return chunks

    def _emit(self, section: Section, base_metadata: Mapping[str, Any]) -> list[Chunk]:
        if len(section.content) <= self.max_chunk_size:
            metadata = enrich_metadata(base_metadata, section, 0, 1)
            return [Chunk(text=section.content, metadata=metadata)]

        pieces = self.fallback.split_text(section.content)
        logger.debug(
            "Section %r has %d chars, split into %d parts",
            section.title,
            len(section.content),
            len(pieces),
        )
        self.metrics_hook.increment(
            names.CHUNKING_SECTIONS_OVERSIZED, labels={"splitter": self.name}
        )
        return [
            Chunk(
                text=piece,
                metadata=enrich_metadata(base_metadata, section, index, len(pieces)),
            )
            for index, piece in enumerate(pieces)
        ]

    def _split_plain(self, document: Document) -> list[Chunk]:
        return [
            Chunk(text=piece, metadata=dict(document.metadata))
            for piece in self.fallback.split_text(document.text)
        ]
