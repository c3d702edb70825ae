# chunking/config.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

Strategy = Literal["asciidoc", "recursive", "fixed"]
Fallback = Literal["recursive", "fixed"]


class SplitterConfig(BaseModel):
    """Configuration for document splitters.

    Immutable. Explicit. No magic defaults from environment.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: Strategy = "asciidoc"
    max_chunk_size: int = Field(gt=0)
    chunk_overlap: int = Field(default=0, ge=0)

    # asciidoc-only settings
    fallback: Fallback = "recursive"  # bounded splitter for oversized sections
    cross_section_overlap: bool = False
    max_header_depth: int = Field(default=6, ge=1)

    @model_validator(mode="after")
    def _overlap_fits_chunk(self) -> "SplitterConfig":
        if self.chunk_overlap > self.max_chunk_size:
            raise ValueError("chunk_overlap must be <= max_chunk_size")
        return self


def load_splitter_config(path: str | Path) -> SplitterConfig:
    logger.info("Loading splitter config from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return SplitterConfig(**data)
