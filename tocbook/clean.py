"""Strip site navigation from downloaded chapter pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from bs4 import BeautifulSoup

from tocbook.parser import iter_chapters
from tocbook.parser.types import ChapterList

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = (
    "<!DOCTYPE html>\n"
    '<html xmlns="http://www.w3.org/1999/xhtml">'
    '<head><meta charset="utf-8"/><title></title></head>'
    "<body></body></html>"
)


class CleanError(ValueError):
    """A chapter page does not have the expected layout."""


def clean_chapter_html(html: str) -> str:
    """Return a page holding only the heading and the article body.

    Share and comment links (``nav.clearfix``) are removed from the
    article.

    Args:
        html: Chapter page as downloaded from the site.

    Returns:
        The reduced page.

    Throws:
        CleanError: If the page has no ``article`` element.
    """

    soup = BeautifulSoup(html, "html.parser")

    article: Any = soup.find("article")
    if article is None:
        raise CleanError("page has no article element")
    heading: Any = soup.find("h1")

    for nav in article.find_all("nav", class_="clearfix"):
        nav.decompose()

    page = BeautifulSoup(PAGE_TEMPLATE, "html.parser")
    body: Any = page.body
    title: Any = page.title

    # A heading inside the article travels with it.
    if heading is not None:
        title.string = heading.get_text(" ", strip=True)
        if not any(parent is article for parent in heading.parents):
            body.append(heading.extract())
    body.append(article.extract())

    return str(page)


def clean_chapter_file(path: Path) -> None:
    """Reduce the chapter page at ``path`` in place."""

    try:
        cleaned = clean_chapter_html(path.read_text(encoding="utf-8"))
    except CleanError as exc:
        raise CleanError(f"{path}: {exc}") from exc

    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(cleaned, encoding="utf-8")
    tmp_path.replace(path)


def clean_chapters(chapters: ChapterList, directory: Path) -> int:
    """Clean the downloaded file of every chapter of the tree.

    Args:
        chapters: Top level chapters of the tree.
        directory: Output directory of the book.

    Returns:
        Number of cleaned files.
    """

    count = 0
    for chapter in iter_chapters(chapters):
        path = chapter.file_path(directory)
        if not path.exists():
            logger.warning("Missing chapter file %s", path)
            continue
        clean_chapter_file(path)
        count += 1

    logger.info("Cleaned %d chapter files", count)
    return count
