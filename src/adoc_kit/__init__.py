# AsciiDoc
from .asciidoc import AsciiDocSemanticSplitter, Section

# Chunking
from .chunking import (
    Chunk,
    Document,
    DocumentSplitter,
    FixedWindowSplitter,
    RecursiveSplitter,
    SplitterConfig,
    TextSplitter,
    create_splitter,
    load_splitter_config,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # AsciiDoc
    "AsciiDocSemanticSplitter",
    "Section",
    # Chunking
    "Chunk",
    "Document",
    "DocumentSplitter",
    "FixedWindowSplitter",
    "RecursiveSplitter",
    "SplitterConfig",
    "TextSplitter",
    "create_splitter",
    "load_splitter_config",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
