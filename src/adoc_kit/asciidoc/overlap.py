# asciidoc/overlap.py

from collections.abc import Sequence

from adoc_kit.chunking.models import Chunk

OVERLAP_SEPARATOR = "\n\n"
OVERLAP_CHARS = "overlap_chars"


def add_cross_section_overlap(
    chunk_groups: Sequence[Sequence[Chunk]],
    *,
    overlap: int,
    max_chunk_size: int,
    enabled: bool = False,
) -> list[Chunk]:
    """
    Flatten per-section chunk groups, optionally carrying context across
    section boundaries.

    Disabled by default: chunks come back unchanged and in order. When
    enabled, the first chunk of each section after the first is prefixed
    with the tail of the chunk before it. The tail is at most `overlap`
    characters, starts on a word boundary, and never pushes the chunk past
    `max_chunk_size`. Chunks inside a split section already overlap and are
    left alone.
    """
    if not enabled or overlap <= 0:
        return [chunk for group in chunk_groups for chunk in group]

    result: list[Chunk] = []
    previous: Chunk | None = None

    for group in chunk_groups:
        for position, chunk in enumerate(group):
            if position == 0 and previous is not None:
                result.append(_prepend_tail(previous, chunk, overlap, max_chunk_size))
            else:
                result.append(chunk)
            previous = chunk

    return result


def _prepend_tail(
    previous: Chunk, chunk: Chunk, overlap: int, max_chunk_size: int
) -> Chunk:
    room = max_chunk_size - len(chunk.text) - len(OVERLAP_SEPARATOR)
    tail = _word_aligned_tail(previous.text, min(overlap, room))
    if not tail:
        return chunk

    metadata = dict(chunk.metadata)
    metadata[OVERLAP_CHARS] = len(tail)
    return Chunk(text=tail + OVERLAP_SEPARATOR + chunk.text, metadata=metadata)


def _word_aligned_tail(text: str, limit: int) -> str:
    if limit <= 0:
        return ""

    tail = text[-limit:]
    if len(tail) < len(text) and not text[-limit - 1].isspace():
        # Cut landed inside a word; skip to the next whitespace.
        boundary = next((i for i, ch in enumerate(tail) if ch.isspace()), None)
        if boundary is None:
            return ""
        tail = tail[boundary:]

    return tail.strip()
