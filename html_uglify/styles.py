"""Rewrite class and id names inside style rules."""
from __future__ import annotations

import logging

from bs4.element import Tag

from html_uglify.lookup import CLASS, ID, LookupTable, PointerResolver
from html_uglify.markup import walk
from html_uglify.selector import parse_selector
from html_uglify.stylesheet import CONDITIONAL_GROUPS, parse_stylesheet

logger = logging.getLogger(__name__)

ID_ATTRIBUTES = ('id', 'for')


def _kind_for(component) -> str | None:
    if component.type == 'class':
        return CLASS
    if component.type == 'id':
        return ID
    if component.type == 'attribute':
        name = (component.attribute or '').lower()
        if name == 'class':
            return CLASS
        if name in ID_ATTRIBUTES:
            return ID
    return None


def process_rules(rules, resolver: PointerResolver, lookups: LookupTable) -> None:
    for rule in rules:
        # go deeper inside @media / @supports to find style rules
        if rule.type == 'atrule' and rule.name in CONDITIONAL_GROUPS:
            process_rules(rule.nodes, resolver, lookups)
        elif rule.type == 'rule':
            selectors = parse_selector(rule.selector)
            for component in selectors.walk():
                kind = _kind_for(component)
                if kind is None:
                    continue
                pointer = resolver.create_lookup(kind, component.value, lookups)
                if pointer:
                    component.value = pointer
            rule.selector = str(selectors)


def rewrite_stylesheet(css: str, resolver: PointerResolver, lookups: LookupTable) -> str:
    stylesheet = parse_stylesheet(css)
    process_rules(stylesheet.nodes, resolver, lookups)
    return str(stylesheet)


def rewrite_styles(tree: Tag, resolver: PointerResolver, lookups: LookupTable) -> Tag:
    for node in [n for n in walk(tree) if n.name == 'style']:
        content = ''.join(str(child) for child in node.contents)
        if not content:
            continue
        node.string = rewrite_stylesheet(content, resolver, lookups)
        logger.debug("rewrote <style> block (%d chars)", len(content))
    return tree
