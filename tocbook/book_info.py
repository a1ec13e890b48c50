"""Descriptive metadata of the generated book."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from attrs import define, field, fields, validators

from tocbook.parser import UNFINISHED_MARKER

# Id of the identifier element that the navigation map refers to.
UID_REF = "dcidid"


class ConfigError(ValueError):
    """The book metadata file cannot be used."""


@define(slots=True, frozen=True)
class BookInfo:
    """Descriptive metadata of the generated book.

    Attributes:
        title: Book title shown by the reading application.
        language: RFC 3066 language code.
        identifier: Stable unique identifier of the book (a URI).
        description: Short description of the book.
        creator: Author name.
        rights_start: First year of the copyright range.
        base_url: Address of the site serving the listing and chapters.
        user_agent: ``User-Agent`` header sent with every request.
        unfinished_marker: Glyph flagging unfinished chapters.
    """

    title: str = "Meaningness"
    language: str = "en"
    identifier: str = "https://meaningness.com"
    description: str = (
        "Better ways of thinking, feeling, and acting—around problems of "
        "meaning and meaninglessness; self and society; ethics, purpose, "
        "and value."
    )
    creator: str = "David Chapman"
    rights_start: int = 2010
    base_url: str = "https://meaningness.com"
    user_agent: str = "meaningness-scraper v0.8"
    unfinished_marker: str = field(
        default=UNFINISHED_MARKER, validator=validators.min_len(1)
    )

    @property
    def uid_ref(self) -> str:
        """Id of the identifier element in the package document."""

        return UID_REF

    def rights(self, year: int) -> str:
        """Return the copyright statement ending at ``year``."""

        return f"Copyright ©{self.rights_start}–{year} {self.creator}."


def load_book_info(path: Path | None = None) -> BookInfo:
    """Read book metadata from a YAML file.

    Args:
        path: Location of a YAML mapping overriding the defaults, or
            ``None`` to use the defaults.

    Returns:
        The resulting ``BookInfo``.

    Throws:
        ConfigError: If the file is not a mapping or has unknown keys.
    """

    if path is None:
        return BookInfo()

    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        return BookInfo()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    known = {attribute.name for attribute in fields(BookInfo)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown keys {', '.join(unknown)}")

    try:
        return BookInfo(**data)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc
