"""HTML → Markdown conversion shared by the direct and browser strategies."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Tag
from markdownify import ATX, markdownify

# Page chrome that never carries the main content.
_STRIP_TAGS = [
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    "aside",
    "iframe",
    "svg",
    "form",
]

_CONTENT_CLASS_RE = re.compile(r"content|main|post|entry|article", re.IGNORECASE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _largest_block(soup: BeautifulSoup) -> Tag | None:
    blocks = soup.find_all(["div", "section"])
    if not blocks:
        return None
    return max(blocks, key=lambda tag: len(tag.get_text(strip=True)))


def _main_region(soup: BeautifulSoup) -> Tag | BeautifulSoup:
    for candidate in (
        soup.find("main"),
        soup.find("article"),
        soup.find("div", class_=_CONTENT_CLASS_RE),
        _largest_block(soup),
        soup.body,
    ):
        if isinstance(candidate, Tag) and candidate.get_text(strip=True):
            return candidate
    return soup


def html_to_markdown(html: str) -> str:
    """Convert a full HTML document to Markdown, keeping only the main content."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_STRIP_TAGS):
        tag.decompose()

    markdown = markdownify(str(_main_region(soup)), heading_style=ATX)

    lines = [line.rstrip() for line in markdown.split("\n")]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip()
