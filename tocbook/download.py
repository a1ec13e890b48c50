"""Download the chapter pages listed in the chapter tree."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import requests  # type: ignore[import-untyped]

from tocbook.parser import Chapter, iter_chapters
from tocbook.parser.types import ChapterList

logger = logging.getLogger(__name__)

# Crawl-Delay requested by the site's robots.txt, in seconds.
CRAWL_DELAY = 10.0


def make_session(user_agent: str) -> requests.Session:
    """Return a session sending ``user_agent`` with every request."""

    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session


def chapter_url(base_url: str, chapter: Chapter) -> str:
    """Return the absolute address of ``chapter`` on the site."""

    return base_url.rstrip("/") + "/" + chapter.url.lstrip("/")


def download_chapters(
    chapters: ChapterList,
    directory: Path,
    base_url: str,
    force: bool = False,
    session: requests.Session | None = None,
    delay: float = CRAWL_DELAY,
) -> ChapterList:
    """Download every chapter of the tree into ``directory``.

    Chapters whose file already exists are skipped unless ``force`` is set,
    in which case the old file is removed and fetched again.

    Args:
        chapters: Top level chapters of the tree.
        directory: Output directory of the book.
        base_url: Site address the chapter paths are relative to.
        force: Download chapters even when their file exists.
        session: Optional session carrying the request headers.
        delay: Pause after each download, in seconds.

    Returns:
        The chapters that were downloaded, in pre-order.
    """

    getter = session or requests
    downloaded: ChapterList = []

    for chapter in iter_chapters(chapters):
        path = chapter.file_path(directory)

        if path.exists():
            if not force:
                logger.debug("Skipping %r, %s exists", chapter.title, path)
                continue
            path.unlink()

        url = chapter_url(base_url, chapter)
        logger.info("Downloading %r from %s", chapter.title, url)
        response = getter.get(url, timeout=30)
        response.raise_for_status()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(response.content)
        downloaded.append(chapter)

        if delay > 0:
            time.sleep(delay)

    logger.info(
        "Downloaded %d chapters into %s", len(downloaded), directory
    )
    return downloaded
