"""Package document (``content.opf``): metadata, manifest and spine."""

from __future__ import annotations

import datetime

from lxml import etree

from tocbook.book_info import BookInfo
from tocbook.parser import iter_chapters
from tocbook.parser.types import ChapterList

from .checks import NCX_FILE_NAME
from .xml_writer import serialize

OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"
DCTERMS_NS = "http://purl.org/dc/terms/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
OPF_VERSION = "2.0"

XHTML_MEDIA_TYPE = "application/xhtml+xml"
NCX_MEDIA_TYPE = "application/x-dtbncx+xml"

NCX_ID = "ncx"
CONTENTS_ID = "contents"


def _opf(tag: str) -> str:
    return f"{{{OPF_NS}}}{tag}"


def _dc(tag: str) -> str:
    return f"{{{DC_NS}}}{tag}"


def part_ids(chapters: ChapterList) -> list[str]:
    """Return the manifest id of every chapter, in pre-order.

    Args:
        chapters: Top level chapters of the tree.

    Returns:
        ``part1``, ``part2``, ... one per chapter.
    """

    return [f"part{k}" for k, _ in enumerate(iter_chapters(chapters), 1)]


def _add_metadata(
    package: etree._Element, info: BookInfo, year: int
) -> None:
    metadata = etree.SubElement(
        package,
        _opf("metadata"),
        nsmap={
            "dc": DC_NS,
            "dcterms": DCTERMS_NS,
            "xsi": XSI_NS,
            "opf": OPF_NS,
        },
    )

    etree.SubElement(metadata, _dc("title")).text = info.title

    language = etree.SubElement(
        metadata, _dc("language"), {f"{{{XSI_NS}}}type": "dcterms:RFC3066"}
    )
    language.text = info.language

    identifier = etree.SubElement(
        metadata,
        _dc("identifier"),
        {"id": info.uid_ref, _opf("scheme"): "URI"},
    )
    identifier.text = info.identifier

    etree.SubElement(metadata, _dc("description")).text = info.description
    etree.SubElement(metadata, _dc("creator")).text = info.creator
    etree.SubElement(metadata, _dc("rights")).text = info.rights(year)


def _add_item(
    manifest: etree._Element, item_id: str, href: str, media_type: str
) -> None:
    etree.SubElement(
        manifest,
        _opf("item"),
        {"id": item_id, "href": href, "media-type": media_type},
    )


def build_opf(
    chapters: ChapterList,
    toc_href: str,
    info: BookInfo,
    year: int | None = None,
) -> bytes:
    """Serialize the package document for the chapter tree.

    Manifest and spine list the chapters in the same pre-order, using the
    ids returned by :func:`part_ids`, after the fixed navigation and table
    of contents entries.

    Args:
        chapters: Top level chapters of the tree.
        toc_href: Package-relative path of the table of contents page.
        info: Book metadata.
        year: Last year of the copyright statement; defaults to the
            current year.

    Returns:
        The encoded document.
    """

    if year is None:
        year = datetime.date.today().year

    package = etree.Element(
        _opf("package"),
        {"unique-identifier": info.uid_ref, "version": OPF_VERSION},
        nsmap={None: OPF_NS},
    )
    _add_metadata(package, info, year)

    chapter_list = list(iter_chapters(chapters))
    ids = part_ids(chapters)

    manifest = etree.SubElement(package, _opf("manifest"))
    _add_item(manifest, NCX_ID, NCX_FILE_NAME, NCX_MEDIA_TYPE)
    _add_item(manifest, CONTENTS_ID, toc_href, XHTML_MEDIA_TYPE)
    for item_id, chapter in zip(ids, chapter_list):
        _add_item(manifest, item_id, chapter.local_path, XHTML_MEDIA_TYPE)

    spine = etree.SubElement(package, _opf("spine"), toc=NCX_ID)
    etree.SubElement(spine, _opf("itemref"), idref=CONTENTS_ID)
    for item_id in ids:
        etree.SubElement(spine, _opf("itemref"), idref=item_id)

    return serialize(package)
