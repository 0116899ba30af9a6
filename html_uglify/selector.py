"""Minimal selector parser: splits a selector into class, id, attribute and text parts.

Only the parts that can carry a class or id name get their own component;
everything else (type selectors, combinators, pseudo classes, commas) is kept
as raw text so serialization of untouched selectors is byte-for-byte.
"""
from __future__ import annotations

import re
from typing import Iterator, List, Optional


IDENT = r"(?:[\w-]|\\[0-9a-fA-F]{1,6}[ \t\n\r\f]?|\\[^\n\r\f0-9a-fA-F]|[^\x00-\x7f])+"

_TOKEN_RE = re.compile(
    r"(?P<class>\.(?P<class_name>%s))"
    r"|(?P<id>#(?P<id_name>%s))"
    r"|(?P<attribute>\[(?:[^\]\"']|\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*')*\])"
    r"|(?P<string>\"(?:[^\"\\]|\\.)*\"|'(?:[^'\\]|\\.)*')"
    r"|(?P<escape>\\.)"
    r"|(?P<other>.)" % (IDENT, IDENT),
    re.S,
)

_ATTRIBUTE_RE = re.compile(
    r"\[\s*(?:(?P<namespace>[^\s|\]=]*)\|(?!=))?(?P<attribute>[^\s~|^$*!=\]]+)\s*"
    r"(?:(?P<operator>[~|^$*]?=)\s*"
    r"(?:\"(?P<dq>(?:[^\"\\]|\\.)*)\"|'(?P<sq>(?:[^'\\]|\\.)*)'|(?P<bare>[^\s\]]+))"
    r"\s*(?P<flags>[iIsS])?\s*)?\]\Z",
    re.S,
)

_ESCAPE_RE = re.compile(r"\\(?:([0-9a-fA-F]{1,6})[ \t\n\r\f]?|(.))", re.S)


def unescape(text: str) -> str:
    def repl(m: re.Match) -> str:
        if m.group(1):
            code = int(m.group(1), 16)
            return chr(code) if 0 < code <= 0x10FFFF else '\ufffd'
        return m.group(2)
    return _ESCAPE_RE.sub(repl, text)


def escape_ident(value: str) -> str:
    out = []
    for i, ch in enumerate(value):
        if i == 0 and ch.isdigit():
            out.append('\\%x ' % ord(ch))
        elif (ch.isascii() and ch.isalnum()) or ch in '-_' or ord(ch) > 0x7f:
            out.append(ch)
        else:
            out.append('\\' + ch)
    return ''.join(out)


class Component:
    """One piece of a selector.

    ``value`` is the decoded name (class, id or attribute value) and may be
    reassigned; ``prefix``/``suffix`` hold the surrounding source text.
    """

    def __init__(self, type: str, value: str, prefix: str = '', suffix: str = '',
                 raw: Optional[str] = None, attribute: Optional[str] = None,
                 namespace: Optional[str] = None, quote: str = ''):
        self.type = type
        self.value = value
        self.prefix = prefix
        self.suffix = suffix
        self.attribute = attribute
        self.namespace = namespace
        self.quote = quote
        self._raw = value if raw is None else raw
        self._original = value

    def __str__(self) -> str:
        if self.value == self._original:
            body = self._raw
        elif self.quote:
            body = self.value.replace('\\', '\\\\').replace(self.quote, '\\' + self.quote)
        else:
            body = escape_ident(self.value)
        return f"{self.prefix}{body}{self.suffix}"

    def __repr__(self) -> str:
        return f"Component({self.type!r}, {self.value!r})"


class Selector:
    def __init__(self, components: List[Component]):
        self.components = components

    def walk(self) -> Iterator[Component]:
        return iter(self.components)

    def __str__(self) -> str:
        return ''.join(str(c) for c in self.components)


def _attribute_component(text: str) -> Component:
    m = _ATTRIBUTE_RE.match(text)
    if not m:
        return Component('text', text)
    attribute = m.group('attribute')
    namespace = m.group('namespace')
    if not m.group('operator'):
        return Component('attribute', '', prefix=text, attribute=attribute, namespace=namespace)
    for group, quote in (('dq', '"'), ('sq', "'"), ('bare', '')):
        if m.group(group) is not None:
            start, end = m.start(group), m.end(group)
            raw = m.group(group)
            return Component(
                'attribute', unescape(raw), prefix=text[:start], suffix=text[end:],
                raw=raw, attribute=attribute, namespace=namespace, quote=quote,
            )
    return Component('text', text)


def parse_selector(text: str) -> Selector:
    components: List[Component] = []
    pending: List[str] = []

    def flush():
        if pending:
            components.append(Component('text', ''.join(pending)))
            pending.clear()

    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup
        if kind == 'class' or kind == 'id':
            flush()
            raw = m.group(kind + '_name')
            components.append(Component(kind, unescape(raw), prefix=m.group(0)[0], raw=raw))
        elif kind == 'attribute':
            flush()
            components.append(_attribute_component(m.group(0)))
        else:
            pending.append(m.group(0))
    flush()
    return Selector(components)
