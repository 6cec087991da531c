# === FILE: site_probe/parser/html_parser.py ===
"""HTML helpers for SiteProbe.

Only one thing is ever extracted from a page: the text of the first
``<title>`` element in document order. Markup is parsed with BeautifulSoup's
lenient ``html.parser`` builder, so broken pages still produce a tree.

The lookup walks the tree with an explicit stack instead of recursion, which
keeps pathologically nested documents from hitting the interpreter's
recursion limit.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("parse_document", "first_element", "find_title")

PARSER = "html.parser"


def parse_document(markup: str | bytes, from_encoding: Optional[str] = None) -> BeautifulSoup:
    """Build a document tree from *markup*.

    For bytes, *from_encoding* (typically the HTTP header charset) is tried
    first; without it the encoding is detected from a BOM or
    ``<meta charset>``, then by guessing.

    May raise :class:`bs4.ParserRejectedMarkup`; callers translate that into
    their own error type.
    """
    if isinstance(markup, bytes):
        return BeautifulSoup(markup, PARSER, from_encoding=from_encoding)
    return BeautifulSoup(markup, PARSER)


def first_element(root: Tag, name: str) -> Optional[Tag]:
    """Return the first descendant of *root* named *name*, depth-first, document order."""
    stack: list[Tag] = [root]
    while stack:
        node = stack.pop()
        if node is not root and node.name == name:
            return node
        # reversed so the leftmost child is popped first
        stack.extend(child for child in reversed(node.contents) if isinstance(child, Tag))
    return None


def find_title(markup: str | bytes | BeautifulSoup) -> Optional[str]:
    """Return the stripped text of the first ``<title>``.

    ``None`` when the document has no title element or the title is empty.
    """
    soup = markup if isinstance(markup, BeautifulSoup) else parse_document(markup)
    tag = first_element(soup, "title")
    if tag is None:
        return None
    text = tag.get_text(strip=True)
    return text or None
