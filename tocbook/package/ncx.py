"""Navigation map (``toc.ncx``) of the package."""

from __future__ import annotations

from lxml import etree

from tocbook.book_info import BookInfo
from tocbook.parser import Chapter, max_depth, walk_chapters
from tocbook.parser.types import ChapterList

from .xml_writer import serialize

NCX_NS = "http://www.daisy.org/z3986/2005/ncx/"
NCX_VERSION = "2005-1"
TOC_LABEL = "Table of Contents"


def _q(tag: str) -> str:
    return f"{{{NCX_NS}}}{tag}"


def _meta(head: etree._Element, name: str, content: str) -> None:
    etree.SubElement(head, _q("meta"), name=name, content=content)


def _nav_point(
    parent: etree._Element, point_id: str, order: int, label: str, src: str
) -> etree._Element:
    """Append a ``navPoint`` with its label and content reference."""

    point = etree.SubElement(
        parent, _q("navPoint"), id=point_id, playOrder=str(order)
    )
    nav_label = etree.SubElement(point, _q("navLabel"))
    etree.SubElement(nav_label, _q("text")).text = label
    etree.SubElement(point, _q("content"), src=src)
    return point


def build_ncx(chapters: ChapterList, toc_href: str, info: BookInfo) -> bytes:
    """Serialize the chapter tree as an NCX navigation map.

    The table of contents page takes play order ``1``; chapters follow in
    pre-order starting at ``2``. Sub-chapter entries are nested inside
    their parent's entry.

    Args:
        chapters: Top level chapters of the tree.
        toc_href: Package-relative path of the table of contents page.
        info: Book metadata.

    Returns:
        The encoded document.
    """

    root = etree.Element(
        _q("ncx"), nsmap={None: NCX_NS}, version=NCX_VERSION
    )

    head = etree.SubElement(root, _q("head"))
    _meta(head, "dtb:uid", info.uid_ref)
    _meta(head, "dtb:depth", str(max_depth(chapters)))
    _meta(head, "dtb:totalPageCount", "0")
    _meta(head, "dtb:maxPageNumber", "0")

    doc_title = etree.SubElement(root, _q("docTitle"))
    etree.SubElement(doc_title, _q("text")).text = info.title

    nav_map = etree.SubElement(root, _q("navMap"))
    _nav_point(nav_map, "contents", 1, TOC_LABEL, toc_href)

    # Innermost open navPoint is last; entering a chapter opens a child of
    # it, leaving the chapter closes it again.
    open_points = [nav_map]
    play_order = 2

    def enter(chapter: Chapter) -> None:
        nonlocal play_order
        point = _nav_point(
            open_points[-1],
            f"navPoint-{play_order}",
            play_order,
            chapter.title,
            chapter.local_path,
        )
        open_points.append(point)
        play_order += 1

    def leave(chapter: Chapter) -> None:
        open_points.pop()

    walk_chapters(chapters, enter, leave)

    return serialize(root)
