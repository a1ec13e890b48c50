"""Pre-order traversal helpers for the chapter tree.

Every numbering scheme in the generated package (navigation play order,
manifest item ids, spine order) is derived from the walk implemented
here: a chapter is visited before its children and children are visited
in listing order.
"""

from __future__ import annotations

from typing import Iterator

from .chapter import Chapter
from .types import ChapterCallback, ChapterList


def walk_chapters(
    chapters: ChapterList,
    on_enter: ChapterCallback,
    on_exit: ChapterCallback | None = None,
) -> None:
    """Visit every chapter of the tree in pre-order.

    Args:
        chapters: Chapters at the top level of the tree.
        on_enter: Called for a chapter before any of its descendants.
        on_exit: Optional callback invoked for a chapter after all of its
            descendants were visited, e.g. to close a nested element.
    """

    # Each stack frame holds a chapter list and the index of the next
    # chapter to visit in it, so deep trees do not hit the recursion limit.
    stack: list[tuple[ChapterList, int, Chapter | None]] = [
        (chapters, 0, None)
    ]
    while stack:
        siblings, index, parent = stack.pop()
        if index >= len(siblings):
            if parent is not None and on_exit is not None:
                on_exit(parent)
            continue

        chapter = siblings[index]
        stack.append((siblings, index + 1, parent))
        on_enter(chapter)
        stack.append((chapter.children, 0, chapter))


def iter_chapters(chapters: ChapterList) -> Iterator[Chapter]:
    """Yield all chapters of the tree in pre-order."""

    for chapter in chapters:
        yield chapter
        yield from iter_chapters(chapter.children)


def count_chapters(chapters: ChapterList) -> int:
    """Return the number of chapters in the tree."""

    return sum(1 for _ in iter_chapters(chapters))


def max_depth(chapters: ChapterList) -> int:
    """Return the number of levels in the tree.

    An empty list has depth ``0``, a single childless chapter depth ``1``.
    """

    if not chapters:
        return 0
    return 1 + max(max_depth(chapter.children) for chapter in chapters)
