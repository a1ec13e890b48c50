"""Chapter of the book, as listed in the table of contents."""

from __future__ import annotations

from pathlib import Path

from attrs import define, field

from .types import ChapterList

CHAPTER_SUFFIX = ".html"


@define(slots=True)
class Chapter:
    """Chapter of the book, as listed in the table of contents.

    Attributes:
        title: Display text with the unfinished marker removed.
        url: Site-relative path of the chapter page such as ``/eggplant``.
        unfinished: Whether the listing marked the chapter as unfinished.
        children: Sub-chapters in listing order.
    """

    title: str
    url: str
    unfinished: bool = False
    children: ChapterList = field(factory=list, repr=False)

    @property
    def local_path(self) -> str:
        """Package-relative file name of the downloaded chapter."""

        return self.url.lstrip("/") + CHAPTER_SUFFIX

    @property
    def depth(self) -> int:
        """Number of levels in the subtree rooted at this chapter."""

        from .traverse import max_depth

        return 1 + max_depth(self.children)

    def file_path(self, directory: Path) -> Path:
        """Return the location of the chapter file inside ``directory``."""

        return directory / self.local_path
