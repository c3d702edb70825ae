# asciidoc/sections.py

from collections.abc import Sequence
from dataclasses import dataclass

from .headers import HeaderMatch, end_of_line

PATH_SEPARATOR = " > "


@dataclass(frozen=True)
class Section:
    depth: int
    title: str
    content: str
    # Ancestor-inclusive breadcrumb, e.g. "Getting Started > REST > JSON"
    header_path: str


def build_sections(text: str, headers: Sequence[HeaderMatch]) -> list[Section]:
    """
    Cut `text` into one section per header.

    A section holds the text between the end of its header line and the next
    header (or the end of the document), trimmed. Sections left empty are
    dropped, so the result can be shorter than `headers`. Text preceding the
    first header belongs to no section.
    """
    sections: list[Section] = []

    for index, header in enumerate(headers):
        content_start = end_of_line(text, header.offset)
        if index + 1 < len(headers):
            content_end = headers[index + 1].offset
        else:
            content_end = len(text)

        content = text[content_start:content_end].strip()
        if not content:
            continue

        sections.append(
            Section(
                depth=header.depth,
                title=header.title,
                content=content,
                header_path=build_header_path(headers, index),
            )
        )

    return sections


def build_header_path(headers: Sequence[HeaderMatch], index: int) -> str:
    """Join the titles of the nearest ancestor at each shallower depth."""
    current = headers[index]
    path = [current.title]

    for previous in reversed(headers[:index]):
        if previous.depth < current.depth:
            path.insert(0, previous.title)
            current = previous

    return PATH_SEPARATOR.join(path)
