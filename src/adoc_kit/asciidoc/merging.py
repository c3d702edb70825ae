# asciidoc/merging.py

"""Coalescing of undersized neighbouring sections.

Short sections make poor retrieval units on their own, so a single
left-to-right pass folds each one into its predecessor while:

- the predecessor is still below MIN_SECTION_SIZE,
- a major boundary (depth <= MAJOR_SECTION_DEPTH on either side) is only
  crossed when the predecessor is below BOUNDARY_PROTECT_THRESHOLD,
- the combined content still fits in `max_chunk_size`.

Sizes are checked before merging, so a merged section can grow past
MIN_SECTION_SIZE but never past `max_chunk_size`.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import partial, reduce

from .sections import Section

MIN_SECTION_SIZE = 300
BOUNDARY_PROTECT_THRESHOLD = 200
MAJOR_SECTION_DEPTH = 2

CONTENT_SEPARATOR = "\n\n"
TITLE_SEPARATOR = " + "
PATH_SEPARATOR = " | "


@dataclass(frozen=True)
class _MergeState:
    pending: Section | None = None
    output: list[Section] = field(default_factory=list)


def merge_small_sections(
    sections: Sequence[Section], max_chunk_size: int
) -> list[Section]:
    step = partial(_fold, max_chunk_size=max_chunk_size)
    state = reduce(step, sections, _MergeState())

    if state.pending is None:
        return state.output
    return [*state.output, state.pending]


def merge_two_sections(first: Section, second: Section) -> Section:
    """Combine two adjacent sections; the earlier one acts as the parent."""
    return Section(
        depth=first.depth,
        title=first.title + TITLE_SEPARATOR + second.title,
        content=first.content + CONTENT_SEPARATOR + second.content,
        header_path=first.header_path + PATH_SEPARATOR + second.header_path,
    )


def should_merge(pending: Section, current: Section, max_chunk_size: int) -> bool:
    pending_size = len(pending.content)
    if pending_size >= MIN_SECTION_SIZE:
        return False

    crosses_major_boundary = (
        pending.depth <= MAJOR_SECTION_DEPTH or current.depth <= MAJOR_SECTION_DEPTH
    )
    if crosses_major_boundary and pending_size >= BOUNDARY_PROTECT_THRESHOLD:
        return False

    return pending_size + len(current.content) <= max_chunk_size


def _fold(state: _MergeState, current: Section, *, max_chunk_size: int) -> _MergeState:
    if state.pending is None:
        return _MergeState(pending=current, output=state.output)

    if should_merge(state.pending, current, max_chunk_size):
        return _MergeState(
            pending=merge_two_sections(state.pending, current), output=state.output
        )

    # The output list is owned by this fold; flushed sections are never reopened.
    state.output.append(state.pending)
    return _MergeState(pending=current, output=state.output)
