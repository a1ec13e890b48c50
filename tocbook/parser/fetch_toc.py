"""Fetch the table of contents page, or reuse a saved copy."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import requests  # type: ignore[import-untyped]

logger = logging.getLogger(__name__)

TOC_FILE_NAME = "contents.html"


def fetch_toc(
    directory: Path,
    base_url: str,
    session: requests.Session | None = None,
) -> Path:
    """Download the table of contents page into ``directory``.

    Args:
        directory: Output directory of the book.
        base_url: Site address; the listing is its root page.
        session: Optional session carrying the request headers.

    Returns:
        Location of the saved page.
    """

    directory.mkdir(parents=True, exist_ok=True)
    target = directory / TOC_FILE_NAME

    logger.info("Downloading table of contents from %s", base_url)
    getter = session or requests
    response = getter.get(base_url.rstrip("/") + "/", timeout=30)
    response.raise_for_status()

    if target.exists():
        target.unlink()
    target.write_text(response.text, encoding="utf-8")
    return target


def copy_toc(source: Path, directory: Path) -> Path:
    """Place an existing listing file in ``directory`` under the package name.

    Args:
        source: Previously saved table of contents page.
        directory: Output directory of the book.

    Returns:
        Location of the listing inside ``directory``.
    """

    directory.mkdir(parents=True, exist_ok=True)
    target = directory / TOC_FILE_NAME

    # Nothing to do when the user pointed at the copy already in place.
    if target.exists() and target.resolve() == source.resolve():
        return target

    if target.exists():
        target.unlink()
    shutil.copyfile(source, target)
    logger.debug("Copied %s to %s", source, target)
    return target
