"""Parser package for table of contents listings."""

from .chapter import Chapter
from .errors import (
    EmptyTitleError,
    ListingError,
    MissingAnchorError,
    OrphanContainerError,
    UnknownNodeError,
)
from .fetch_toc import TOC_FILE_NAME, copy_toc, fetch_toc
from .parse_toc import UNFINISHED_MARKER, build_chapters, parse_toc
from .traverse import count_chapters, iter_chapters, max_depth, walk_chapters

__all__ = [
    "Chapter",
    "EmptyTitleError",
    "ListingError",
    "MissingAnchorError",
    "OrphanContainerError",
    "TOC_FILE_NAME",
    "UNFINISHED_MARKER",
    "UnknownNodeError",
    "build_chapters",
    "copy_toc",
    "count_chapters",
    "fetch_toc",
    "iter_chapters",
    "max_depth",
    "parse_toc",
    "walk_chapters",
]
