"""Tests for chapter tree traversal and derived properties."""

from __future__ import annotations

from pathlib import Path

from tocbook.parser import (
    Chapter,
    count_chapters,
    iter_chapters,
    max_depth,
    walk_chapters,
)
from tocbook.parser.types import ChapterList


def test_max_depth() -> None:
    leaf = Chapter(title="Leaf", url="/leaf")

    assert max_depth([]) == 0
    assert max_depth([leaf]) == 1
    assert max_depth([Chapter(title="P", url="/p", children=[leaf])]) == 2


def test_max_depth_uses_deepest_branch(sample_chapters: ChapterList) -> None:
    shallow = Chapter(title="E", url="/e")

    assert max_depth(sample_chapters + [shallow]) == 3
    assert max_depth([shallow] + sample_chapters) == 3


def test_chapter_depth(sample_chapters: ChapterList) -> None:
    a = sample_chapters[0]

    assert a.depth == 3
    assert a.children[0].depth == 1
    assert a.children[1].depth == 2


def test_iter_chapters_is_pre_order(sample_chapters: ChapterList) -> None:
    assert [c.title for c in iter_chapters(sample_chapters)] == [
        "A",
        "B",
        "C",
        "D",
    ]
    assert count_chapters(sample_chapters) == 4
    assert count_chapters([]) == 0


def test_walk_calls_exit_after_descendants(
    sample_chapters: ChapterList,
) -> None:
    events: list[str] = []

    walk_chapters(
        sample_chapters,
        lambda c: events.append(f"+{c.title}"),
        lambda c: events.append(f"-{c.title}"),
    )

    assert events == ["+A", "+B", "-B", "+C", "+D", "-D", "-C", "-A"]


def test_walk_without_exit_callback(sample_chapters: ChapterList) -> None:
    seen: list[str] = []

    walk_chapters(sample_chapters, lambda c: seen.append(c.title))

    assert seen == [c.title for c in iter_chapters(sample_chapters)]


def test_walk_handles_very_deep_trees() -> None:
    root = Chapter(title="0", url="/0")
    node = root
    for level in range(1, 3000):
        child = Chapter(title=str(level), url=f"/{level}")
        node.children = [child]
        node = child

    entered: list[Chapter] = []
    exited: list[Chapter] = []
    walk_chapters([root], entered.append, exited.append)

    assert len(entered) == 3000
    assert exited[0] is node
    assert exited[-1] is root


def test_local_path_and_file_path(tmp_path: Path) -> None:
    chapter = Chapter(title="Nested", url="/part/section")

    assert chapter.local_path == "part/section.html"
    assert chapter.file_path(tmp_path) == tmp_path / "part" / "section.html"
