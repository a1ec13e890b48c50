"""Zip the package directory into an EPUB file."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path

from tocbook.parser import iter_chapters
from tocbook.parser.types import ChapterList

from .checks import (
    CONTAINER_FILE_NAME,
    MIMETYPE_FILE_NAME,
    NCX_FILE_NAME,
    OPF_FILE_NAME,
)

logger = logging.getLogger(__name__)

EPUB_SUFFIX = ".epub"


def package_members(chapters: ChapterList, toc_href: str) -> list[str]:
    """Return the package-relative paths that belong in the archive.

    ``mimetype`` comes first, then the metadata files, the table of
    contents page and the chapter files in pre-order.
    """

    members = [
        MIMETYPE_FILE_NAME,
        CONTAINER_FILE_NAME,
        OPF_FILE_NAME,
        NCX_FILE_NAME,
        toc_href,
    ]
    members.extend(chapter.local_path for chapter in iter_chapters(chapters))
    return members


def make_archive(
    directory: Path, output: Path, chapters: ChapterList, toc_href: str
) -> Path:
    """Create the EPUB archive from the package files in ``directory``.

    Only the files the package refers to are added; other files in the
    directory are left out. The ``mimetype`` file is stored first and
    uncompressed, as reading applications expect; every other file is
    deflated.

    Args:
        directory: Package directory written by ``write_package``.
        output: Destination path ending in ``.epub``.
        chapters: Top level chapters of the tree.
        toc_href: Package-relative path of the table of contents page.

    Returns:
        The path of the archive.

    Throws:
        FileNotFoundError: If a file of the package is missing.
    """

    if output.suffix != EPUB_SUFFIX:
        raise ValueError(f"{output}: archive name must end in {EPUB_SUFFIX}")

    members = package_members(chapters, toc_href)
    missing = [name for name in members if not (directory / name).is_file()]
    if missing:
        raise FileNotFoundError(
            f"{directory}: missing package files {', '.join(missing)}"
        )

    if output.exists():
        output.unlink()
    output.parent.mkdir(parents=True, exist_ok=True)

    with zipfile.ZipFile(output, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name in members:
            compress_type = (
                zipfile.ZIP_STORED
                if name == MIMETYPE_FILE_NAME
                else zipfile.ZIP_DEFLATED
            )
            zf.write(directory / name, name, compress_type=compress_type)

    logger.info("Created %s with %d files", output, len(members))
    return output
