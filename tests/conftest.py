"""Shared fixtures for the chapter tree and package tests."""

from __future__ import annotations

import pytest

from tocbook.parser import Chapter
from tocbook.parser.types import ChapterList

# Listing shaped like the site's table of contents: A -> [B, C -> [D]].
SAMPLE_TOC = """
<html>
  <body>
    <ul class="book-toc">
      <li><a href="/a">A</a></li>
      <li class="book_toc_container">
        <ul>
          <li><a href="/b">B ⚒</a></li>
          <li><a href="/c">C</a></li>
          <li class="book_toc_container">
            <ul>
              <li><a href="/d">D</a></li>
            </ul>
          </li>
        </ul>
      </li>
    </ul>
  </body>
</html>
"""

CHAPTER_PAGE = """
<html>
  <head><title>Site</title></head>
  <body>
    <header><nav class="menu"><a href="/">Home</a></nav></header>
    <h1>Chapter heading</h1>
    <article>
      <p>Chapter body.</p>
      <nav class="clearfix"><a href="#comments">Comments</a></nav>
    </article>
    <footer>Footer</footer>
  </body>
</html>
"""


@pytest.fixture
def sample_chapters() -> ChapterList:
    """Return the tree A -> [B, C -> [D]] built by hand."""

    d = Chapter(title="D", url="/d")
    c = Chapter(title="C", url="/c", children=[d])
    b = Chapter(title="B", url="/b", unfinished=True)
    a = Chapter(title="A", url="/a", children=[b, c])
    return [a]


@pytest.fixture
def sample_toc() -> str:
    """Return the listing page for the tree A -> [B, C -> [D]]."""

    return SAMPLE_TOC


@pytest.fixture
def chapter_page() -> str:
    """Return a chapter page as served by the site."""

    return CHAPTER_PAGE
