"""Write the package metadata files next to the downloaded chapters."""

from __future__ import annotations

import logging
from pathlib import Path

from tocbook.book_info import BookInfo
from tocbook.parser.types import ChapterList

from .checks import (
    CONTAINER_FILE_NAME,
    MIMETYPE_FILE_NAME,
    NCX_FILE_NAME,
    OPF_FILE_NAME,
    check_tree,
)
from .container import build_container
from .ncx import build_ncx
from .opf import build_opf

logger = logging.getLogger(__name__)

MIMETYPE = "application/epub+zip"


def _replace(path: Path, content: bytes) -> Path:
    """Write ``content`` to ``path``, removing any previous file first."""

    path.parent.mkdir(parents=True, exist_ok=True)
    if path.exists():
        path.unlink()
    path.write_bytes(content)
    logger.debug("Wrote %s (%d bytes)", path, len(content))
    return path


def write_package(
    chapters: ChapterList,
    directory: Path,
    toc_href: str,
    info: BookInfo,
    year: int | None = None,
) -> list[Path]:
    """Write the navigation map, package document, mimetype and container.

    Args:
        chapters: Top level chapters of the tree.
        directory: Output directory holding the chapter files.
        toc_href: Package-relative path of the table of contents page.
        info: Book metadata.
        year: Last year of the copyright statement.

    Returns:
        Paths of the written files.

    Throws:
        PackageError: If the tree cannot be packaged consistently.
    """

    check_tree(chapters, toc_href)

    # Build every document before touching the directory.
    documents = [
        (NCX_FILE_NAME, build_ncx(chapters, toc_href, info)),
        (OPF_FILE_NAME, build_opf(chapters, toc_href, info, year)),
        (MIMETYPE_FILE_NAME, MIMETYPE.encode("ascii")),
        (CONTAINER_FILE_NAME, build_container()),
    ]

    written = [_replace(directory / name, data) for name, data in documents]
    logger.info("Wrote package files to %s", directory)
    return written
