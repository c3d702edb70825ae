# chunking/factory.py

from adoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentSplitter, TextSplitter
from .config import SplitterConfig


def create_splitter(
    config: SplitterConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> DocumentSplitter:
    """Create a document splitter from config.

    Args:
        config: Splitter configuration specifying strategy, sizes, etc.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        Configured DocumentSplitter implementation.

    Raises:
        ValueError: If strategy is unknown or the sizes are rejected by
            the selected splitter.

    Example:
        >>> config = SplitterConfig(max_chunk_size=1000, chunk_overlap=200)
        >>> splitter = create_splitter(config)
        >>> chunks = splitter.split(Document(text=source, metadata={...}))
    """
    if config.strategy == "asciidoc":
        from adoc_kit.asciidoc.splitter import AsciiDocSemanticSplitter

        return AsciiDocSemanticSplitter(
            max_chunk_size=config.max_chunk_size,
            chunk_overlap=config.chunk_overlap,
            fallback=_create_text_splitter(config.fallback, config, metrics_hook),
            cross_section_overlap=config.cross_section_overlap,
            max_header_depth=config.max_header_depth,
            metrics_hook=metrics_hook,
        )

    if config.strategy in ("recursive", "fixed"):
        return _create_text_splitter(config.strategy, config, metrics_hook)

    raise ValueError(f"Unknown splitter strategy: {config.strategy}")


def _create_text_splitter(
    strategy: str, config: SplitterConfig, metrics_hook: MetricsHook
) -> TextSplitter:
    if strategy == "recursive":
        from .recursive import RecursiveSplitter

        return RecursiveSplitter(
            chunk_size=config.max_chunk_size,
            chunk_overlap=config.chunk_overlap,
            metrics_hook=metrics_hook,
        )

    if strategy == "fixed":
        from .fixed import FixedWindowSplitter

        return FixedWindowSplitter(
            chunk_size=config.max_chunk_size,
            overlap=config.chunk_overlap,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown splitter strategy: {strategy}")
