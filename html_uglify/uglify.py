"""Run a full rewrite over one document."""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Tuple

from bs4.element import Tag

from html_uglify import __version__
from html_uglify.elements import rewrite_elements
from html_uglify.lookup import CLASS, ID, LookupTable, PointerResolver
from html_uglify.markup import parse_html
from html_uglify.names import NameSequence
from html_uglify.styles import rewrite_styles

logger = logging.getLogger(__name__)


class HTMLUglify:
    """Rename classes and ids of a document to short generated names.

    Every run gets its own lookup table and freshly started name sequences,
    so the same input always produces the same output and concurrent runs
    share no state. Style rules are rewritten before markup attributes.
    """

    def __init__(self, whitelist: Optional[Iterable[str]] = None):
        self.version = __version__
        self.whitelist = list(whitelist or [])

    @staticmethod
    def new_generators() -> dict:
        return {ID: NameSequence(), CLASS: NameSequence()}

    def rewrite(self, tree: Tag) -> Tuple[Tag, LookupTable]:
        lookups = LookupTable()
        resolver = PointerResolver(self.whitelist, self.new_generators())
        tree = rewrite_styles(tree, resolver, lookups)
        tree = rewrite_elements(tree, resolver, lookups)
        logger.debug(
            "rewrote %d ids, %d classes",
            len(lookups.mapping(ID)), len(lookups.mapping(CLASS)),
        )
        return tree, lookups

    def process(self, tree: Tag) -> Tag:
        return self.rewrite(tree)[0]

    def process_html(self, html: str) -> str:
        return str(self.process(parse_html(html)))


def uglify(whitelist: Optional[Iterable[str]] = None) -> Callable[[Tag], Tag]:
    """Return a ``tree -> tree`` callable bound to ``whitelist``."""
    plugin = HTMLUglify(whitelist)
    return plugin.process


def process(html: str, whitelist: Optional[Iterable[str]] = None) -> str:
    return HTMLUglify(whitelist).process_html(html)
