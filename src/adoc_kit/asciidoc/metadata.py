# asciidoc/metadata.py

from collections.abc import Mapping
from typing import Any

from .sections import Section

SECTION_TITLE = "section_title"
SECTION_LEVEL = "section_level"
SECTION_PATH = "section_path"
SECTION_PART = "section_part"


def enrich_metadata(
    base: Mapping[str, Any],
    section: Section,
    part_index: int,
    total_parts: int,
) -> dict[str, Any]:
    """
    Copy `base` and add the section fields.

    Base keys with the same names are overwritten. `section_part` ("i/N",
    1-based) is only set when the section was split into several parts.
    """
    metadata = dict(base)

    metadata[SECTION_TITLE] = section.title
    metadata[SECTION_LEVEL] = section.depth
    metadata[SECTION_PATH] = section.header_path

    if total_parts > 1:
        metadata[SECTION_PART] = f"{part_index + 1}/{total_parts}"

    return metadata
