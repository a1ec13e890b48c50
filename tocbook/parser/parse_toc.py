"""Build the chapter tree from a table of contents page."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from bs4 import BeautifulSoup

from .chapter import Chapter
from .errors import (
    EmptyTitleError,
    MissingAnchorError,
    OrphanContainerError,
    UnknownNodeError,
)
from .types import ChapterList

logger = logging.getLogger(__name__)

# Pickaxe symbol the site appends to chapters that are not finished yet.
UNFINISHED_MARKER = "⚒"

TOC_CLASS = "book-toc"
CONTAINER_CLASS = "book_toc_container"


def parse_toc(html: str, marker: str = UNFINISHED_MARKER) -> ChapterList:
    """Parse a table of contents page into a chapter tree.

    Args:
        html: Raw HTML of the page holding the ``ul.book-toc`` listing.
        marker: Glyph flagging unfinished chapters.

    Returns:
        Top level chapters in listing order.

    Throws:
        ListingError: If the listing is malformed.
    """

    soup = BeautifulSoup(html, "html.parser")

    toc: Any = soup.find("ul", class_=TOC_CLASS)
    if toc is None:
        logger.warning("No %s list found; the book has no chapters", TOC_CLASS)
        return []

    chapters = build_chapters(toc.find_all("li", recursive=False), marker)
    if not chapters:
        logger.warning("The %s list is empty", TOC_CLASS)
    return chapters


def build_chapters(
    nodes: Iterable[Any], marker: str = UNFINISHED_MARKER
) -> ChapterList:
    """Build the chapters found at one nesting level of the listing.

    A list item without a class introduces a chapter. A list item with the
    container class holds the sub-chapters of the chapter introduced just
    before it and is expanded recursively.

    Args:
        nodes: Sibling ``li`` elements in document order.
        marker: Glyph flagging unfinished chapters.

    Returns:
        Chapters at this level, in the order they appear.
    """

    result: ChapterList = []
    parent: Chapter | None = None
    parent_expanded = False

    for node in nodes:
        classes = node.get("class")

        if classes is None:
            parent = _chapter_from_node(node, marker)
            parent_expanded = False
            result.append(parent)
            continue

        if list(classes) != [CONTAINER_CLASS]:
            raise UnknownNodeError(
                node, f"unrecognized list item class {' '.join(classes)!r}"
            )

        # The container must follow a chapter that has no children yet.
        if parent is None:
            raise OrphanContainerError(node)
        if parent_expanded:
            raise OrphanContainerError(
                node, f"second nested list for chapter {parent.title!r}"
            )

        nested: Any = node.find("ul", recursive=False)
        if nested is None:
            raise UnknownNodeError(node, "container without a nested list")

        parent.children = build_chapters(
            nested.find_all("li", recursive=False), marker
        )
        parent_expanded = True
        logger.debug(
            "Chapter %r has %d sub-chapters", parent.title, len(parent.children)
        )

    return result


def _chapter_from_node(node: Any, marker: str) -> Chapter:  # noqa: ANN401
    """Create a chapter from a plain list item holding a link."""

    anchor = node.find("a", recursive=False)
    if anchor is None:
        raise MissingAnchorError(node)

    href = (anchor.get("href") or "").strip()
    if not href:
        raise MissingAnchorError(node)

    text = anchor.get_text()
    title = text.replace(marker, "").strip()
    if not title:
        raise EmptyTitleError(node)

    return Chapter(title=title, url=href, unfinished=marker in text)
