# chunking/fixed.py

from adoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextSplitter


class FixedWindowSplitter(TextSplitter):
    """
    Character windows of `chunk_size`, each starting `chunk_size - overlap`
    after the previous one. Ignores text structure entirely.
    """

    name = "fixed"

    def __init__(
        self,
        chunk_size: int,
        overlap: int = 0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        if overlap < 0:
            raise ValueError("overlap must be >= 0")
        if overlap >= chunk_size:
            raise ValueError("overlap must be < chunk_size")

        self.chunk_size = chunk_size
        self.chunk_overlap = overlap
        self.metrics_hook = metrics_hook

    def split_text(self, text: str) -> list[str]:
        pieces = []
        step = self.chunk_size - self.chunk_overlap
        text_len = len(text)

        for start in range(0, text_len, step):
            end = min(start + self.chunk_size, text_len)
            pieces.append(text[start:end])

            if end == text_len:
                break

        return pieces
