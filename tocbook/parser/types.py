"""Common type aliases for parser structures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .chapter import Chapter  # noqa: F401


ChapterList = list["Chapter"]
ChapterCallback = Callable[["Chapter"], None]
