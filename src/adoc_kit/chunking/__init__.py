from .base import DocumentSplitter, TextSplitter
from .config import SplitterConfig, load_splitter_config
from .factory import create_splitter
from .fixed import FixedWindowSplitter
from .models import Chunk, Document
from .recursive import RecursiveSplitter

__all__ = [
    "Chunk",
    "Document",
    "DocumentSplitter",
    "FixedWindowSplitter",
    "RecursiveSplitter",
    "SplitterConfig",
    "TextSplitter",
    "create_splitter",
    "load_splitter_config",
]
