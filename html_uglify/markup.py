"""BeautifulSoup helpers for the markup tree."""
from __future__ import annotations

from typing import Iterator

from bs4 import BeautifulSoup
from bs4.element import Tag


def parse_html(html: str) -> BeautifulSoup:
    # keep class as the raw attribute string instead of a list
    return BeautifulSoup(html, 'html.parser', multi_valued_attributes=None)


def walk(tree: Tag) -> Iterator[Tag]:
    """Yield ``tree`` and every element below it in document order."""
    yield tree
    for node in tree.descendants:
        if isinstance(node, Tag):
            yield node
