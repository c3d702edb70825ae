from .headers import HeaderMatch, parse_headers
from .merging import (
    BOUNDARY_PROTECT_THRESHOLD,
    MIN_SECTION_SIZE,
    merge_small_sections,
    merge_two_sections,
)
from .metadata import enrich_metadata
from .overlap import add_cross_section_overlap
from .sections import Section, build_header_path, build_sections
from .splitter import AsciiDocSemanticSplitter

__all__ = [
    "AsciiDocSemanticSplitter",
    "BOUNDARY_PROTECT_THRESHOLD",
    "HeaderMatch",
    "MIN_SECTION_SIZE",
    "Section",
    "add_cross_section_overlap",
    "build_header_path",
    "build_sections",
    "enrich_metadata",
    "merge_small_sections",
    "merge_two_sections",
    "parse_headers",
]
