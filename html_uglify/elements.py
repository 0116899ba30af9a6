"""Rewrite class, id and reference attributes on markup elements."""
from __future__ import annotations

import re

from bs4.element import Tag

from html_uglify.lookup import CLASS, ID, LookupTable, PointerResolver
from html_uglify.markup import walk

REFERENCE_TAGS = {'use'}
REFERENCE_ATTRS = ('href', 'xlink:href')


def pointerize_class(node: Tag, resolver: PointerResolver, lookups: LookupTable) -> None:
    classes = node.attrs.get('class')
    if isinstance(classes, list):
        classes = ' '.join(classes)
    if not classes:
        return
    out = []
    for value in re.split(r'\s+', classes):
        pointer = resolver.create_lookup(CLASS, value, lookups)
        out.append(pointer or value)
    node.attrs['class'] = ' '.join(out)


def pointerize_id_and_for(attr: str, node: Tag, resolver: PointerResolver, lookups: LookupTable) -> None:
    value = node.attrs.get(attr)
    if not value:
        return
    leading_hash = value[0] == '#'
    if leading_hash:
        value = value[1:]
    pointer = resolver.create_lookup(ID, value, lookups)
    if pointer:
        node.attrs[attr] = ('#' if leading_hash else '') + pointer


def rewrite_elements(tree: Tag, resolver: PointerResolver, lookups: LookupTable) -> Tag:
    for node in walk(tree):
        if not node.attrs:
            continue
        if node.attrs.get('class'):
            pointerize_class(node, resolver, lookups)
        for attr in ('id', 'for'):
            pointerize_id_and_for(attr, node, resolver, lookups)
        if node.name in REFERENCE_TAGS:
            for attr in REFERENCE_ATTRS:
                if node.attrs.get(attr):
                    pointerize_id_and_for(attr, node, resolver, lookups)
    return tree
