"""Consistency checks run on the chapter tree before it is packaged."""

from __future__ import annotations

from pathlib import PurePosixPath
from urllib.parse import urlsplit

from tocbook.parser import iter_chapters
from tocbook.parser.types import ChapterList

NCX_FILE_NAME = "toc.ncx"
OPF_FILE_NAME = "content.opf"
MIMETYPE_FILE_NAME = "mimetype"
CONTAINER_FILE_NAME = "META-INF/container.xml"

RESERVED_PATHS = frozenset(
    {NCX_FILE_NAME, OPF_FILE_NAME, MIMETYPE_FILE_NAME, CONTAINER_FILE_NAME}
)


class PackageError(ValueError):
    """The chapter tree cannot be packaged consistently."""


def is_package_relative(path: str) -> bool:
    """Return whether ``path`` stays inside the package directory."""

    parts = urlsplit(path)
    if parts.scheme or parts.netloc:
        return False

    posix = PurePosixPath(path)
    return not posix.is_absolute() and ".." not in posix.parts


def check_tree(chapters: ChapterList, toc_href: str | None = None) -> None:
    """Ensure every chapter maps to its own file in the package.

    Args:
        chapters: Top level chapters of the tree.
        toc_href: Package-relative path of the table of contents page.

    Throws:
        PackageError: If a chapter file would land outside the package,
            two entries share a file, or a chapter would overwrite one of
            the package metadata files.
    """

    reserved = set(RESERVED_PATHS)
    if toc_href:
        reserved.add(toc_href)

    seen: dict[str, str] = {}
    for chapter in iter_chapters(chapters):
        path = chapter.local_path
        if not is_package_relative(path):
            raise PackageError(
                f"chapter {chapter.title!r} points outside the package: {path}"
            )
        if path in reserved:
            raise PackageError(
                f"chapter {chapter.title!r} would overwrite {path}"
            )
        if path in seen:
            raise PackageError(
                f"chapters {seen[path]!r} and {chapter.title!r} "
                f"share the file {path}"
            )
        seen[path] = chapter.title
