# asciidoc/headers.py

"""Header line scanning for AsciiDoc sources.

AsciiDoc section titles are lines starting with a run of `=` markers:

    = Document Title         (depth 1)
    == Section               (depth 2)
    === Subsection           (depth 3)
    ==== Subsubsection       (depth 4)
    ===== Paragraph          (depth 5)

The run must be followed by whitespace and a title. Lines made of markers
only (`====` opens an example block) are never headers.
"""

from collections.abc import Iterator
from dataclasses import dataclass

HEADER_MARKER = "="

# AsciiDoc defines section levels 0 to 5, i.e. at most six markers.
DEFAULT_MAX_DEPTH = 6


@dataclass(frozen=True)
class HeaderMatch:
    depth: int
    title: str
    offset: int


def parse_headers(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> list[HeaderMatch]:
    """Return the header lines of `text` in document order.

    An empty list means the document is unstructured. Marker runs longer
    than `max_depth` are left as body text.
    """
    headers: list[HeaderMatch] = []
    for offset, line in _iter_lines(text):
        header = _match_header(line, offset, max_depth)
        if header is not None:
            headers.append(header)
    return headers


def end_of_line(text: str, offset: int) -> int:
    """Index just past the newline ending the line at `offset`."""
    newline = text.find("\n", offset)
    return len(text) if newline == -1 else newline + 1


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    offset = 0
    while offset < len(text):
        end = end_of_line(text, offset)
        yield offset, text[offset:end]
        offset = end


def _match_header(line: str, offset: int, max_depth: int) -> HeaderMatch | None:
    depth = len(line) - len(line.lstrip(HEADER_MARKER))
    if depth == 0 or depth > max_depth:
        return None

    rest = line[depth:]
    if not rest or not rest[0].isspace():
        return None

    title = rest.strip()
    if not title:
        return None

    return HeaderMatch(depth=depth, title=title, offset=offset)
