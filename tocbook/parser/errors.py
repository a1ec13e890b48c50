"""Errors raised while reading a table of contents listing."""

from __future__ import annotations

from typing import Any


def _describe(node: Any) -> str:  # noqa: ANN401
    """Return a short, single line description of a listing node."""

    text = " ".join(node.get_text(" ", strip=True).split())
    if len(text) > 60:
        text = text[:57] + "..."
    return f"<{node.name}> {text!r}"


class ListingError(ValueError):
    """The listing does not describe a valid chapter tree."""

    reason = "malformed listing node"

    def __init__(self, node: Any = None, detail: str | None = None) -> None:  # noqa: ANN401
        message = detail or self.reason
        if node is not None:
            message = f"{message}: {_describe(node)}"
        super().__init__(message)
        self.node = node


class MissingAnchorError(ListingError):
    """A chapter entry has no link or the link has no target."""

    reason = "chapter entry without a link target"


class EmptyTitleError(ListingError):
    """A chapter entry has no display text."""

    reason = "chapter entry with an empty title"


class OrphanContainerError(ListingError):
    """A nested list appears where there is no chapter to attach it to."""

    reason = "nested chapter list without a parent chapter"


class UnknownNodeError(ListingError):
    """A list item uses a nesting scheme the builder does not know."""

    reason = "unrecognized listing entry"
