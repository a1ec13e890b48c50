"""Tests for loading book metadata."""

from __future__ import annotations

from pathlib import Path

import pytest

from tocbook.book_info import BookInfo, ConfigError, load_book_info


def test_defaults() -> None:
    info = load_book_info(None)

    assert info == BookInfo()
    assert info.title == "Meaningness"
    assert info.uid_ref == "dcidid"
    assert info.rights(2020) == "Copyright ©2010–2020 David Chapman."


def test_yaml_overrides(tmp_path: Path) -> None:
    path = tmp_path / "book.yaml"
    path.write_text(
        "title: Other Book\ncreator: Someone\nrights_start: 2001\n",
        encoding="utf-8",
    )

    info = load_book_info(path)

    assert info.title == "Other Book"
    assert info.language == "en"
    assert info.rights(2002) == "Copyright ©2001–2002 Someone."


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "book.yaml"
    path.write_text("", encoding="utf-8")

    assert load_book_info(path) == BookInfo()


@pytest.mark.parametrize(
    "content, message",
    [
        ("- a\n- b\n", "mapping"),
        ("titel: typo\n", "unknown keys titel"),
        ("title: [unclosed\n", "invalid YAML"),
        ("unfinished_marker: ''\n", "unfinished_marker"),
    ],
)
def test_invalid_files(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "book.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_book_info(path)
