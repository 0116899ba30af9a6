"""Lenient style sheet parser.

Top-level at-rules are split out with a brace scanner; ``@media`` and
``@supports`` blocks are parsed recursively, every other at-rule is kept as
written. Runs of ordinary rules between them are cut into selector and
block spans, and only the selector span is ever rewritten, so declarations
and selectors that were not changed come back exactly as written.
"""
from __future__ import annotations

import re
from typing import List, Tuple, Union

CONDITIONAL_GROUPS = ('media', 'supports')

_AT_NAME_RE = re.compile(r"@(-?[\w-]+)")


def _skip_ignored(css: str, i: int) -> int:
    """Return the index after a comment, string or escape starting at i (i if none)."""
    if css.startswith('/*', i):
        end = css.find('*/', i + 2)
        return len(css) if end == -1 else end + 2
    ch = css[i]
    if ch == '\\':
        return min(i + 2, len(css))
    if ch in '"\'':
        k = i + 1
        while k < len(css):
            if css[k] == '\\':
                k += 2
                continue
            if css[k] == ch or css[k] == '\n':
                return k + 1
            k += 1
        return len(css)
    return i


def _find_block_end(css: str, start: int) -> int:
    """Index of the '}' closing the block opened at ``start`` (len(css) if unclosed)."""
    depth = 0
    i = start
    n = len(css)
    while i < n:
        j = _skip_ignored(css, i)
        if j != i:
            i = j
            continue
        ch = css[i]
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return n


def _find_prelude_end(css: str, start: int) -> Tuple[int, str]:
    """Scan an at-rule prelude; return (index, terminator) where terminator is '{', ';' or ''."""
    i = start
    n = len(css)
    while i < n:
        j = _skip_ignored(css, i)
        if j != i:
            i = j
            continue
        if css[i] in '{;':
            return i, css[i]
        if css[i] == '}':
            return i, ''
        i += 1
    return n, ''


def _leading_trivia(text: str) -> int:
    """Length of the whitespace and comments at the start of ``text``."""
    i = 0
    n = len(text)
    while i < n:
        if text[i].isspace():
            i += 1
        elif text.startswith('/*', i):
            end = text.find('*/', i + 2)
            i = n if end == -1 else end + 2
        else:
            break
    return i


class Rule:
    """An ordinary style rule: a mutable selector and its block, kept as written."""

    type = 'rule'

    def __init__(self, prelude: str, block: str):
        start = _leading_trivia(prelude)
        self.selector = prelude[start:].rstrip()
        self.lead = prelude[:start]
        self.trail = prelude[start + len(self.selector):]
        self.block = block

    def __str__(self) -> str:
        return f"{self.lead}{self.selector}{self.trail}{self.block}"

    def __repr__(self) -> str:
        return f"<Rule {self.selector!r}>"


class RuleChunk:
    """Source text between top-level at-rules, split into rules and stray text."""

    def __init__(self, text: str):
        self.parts: List[Union[Rule, str]] = []
        self.rules: List[Rule] = []
        i = 0
        n = len(text)
        while i < n:
            end, terminator = _find_prelude_end(text, i)
            if terminator != '{':
                # stray ';' or '}', or trailing text with no block
                stop = min(end + 1, n)
                self.parts.append(text[i:stop])
                i = stop
                continue
            close = _find_block_end(text, end)
            rule = Rule(text[i:end], text[end:close + 1])
            self.parts.append(rule)
            self.rules.append(rule)
            i = close + 1

    def __str__(self) -> str:
        return ''.join(str(p) for p in self.parts)


class AtRule:
    type = 'atrule'

    def __init__(self, name: str, head: str, body: str, tail: str):
        self.name = name
        self.head = head
        self.tail = tail
        self.body: Union[Stylesheet, str] = body
        if name in CONDITIONAL_GROUPS:
            self.body = parse_stylesheet(body)

    @property
    def nodes(self) -> list:
        if isinstance(self.body, Stylesheet):
            return self.body.nodes
        return []

    def __str__(self) -> str:
        return f"{self.head}{self.body}{self.tail}"

    def __repr__(self) -> str:
        return f"<AtRule @{self.name}>"


class Stylesheet:
    def __init__(self, segments: List[Union[AtRule, RuleChunk]]):
        self.segments = segments

    @property
    def nodes(self) -> list:
        out: list = []
        for segment in self.segments:
            if isinstance(segment, RuleChunk):
                out.extend(segment.rules)
            else:
                out.append(segment)
        return out

    def __str__(self) -> str:
        return ''.join(str(s) for s in self.segments)


def _read_at_rule(css: str, start: int) -> Tuple[AtRule, int]:
    m = _AT_NAME_RE.match(css, start)
    name = m.group(1).lower() if m else ''
    end, terminator = _find_prelude_end(css, m.end() if m else start + 1)
    if terminator != '{':
        # statement at-rule (@import ...;) or one cut short by '}' / end of input
        stop = end + 1 if terminator == ';' else end
        return AtRule(name, css[start:stop], '', ''), stop
    close = _find_block_end(css, end)
    tail = css[close:close + 1]
    return AtRule(name, css[start:end + 1], css[end + 1:close], tail), close + len(tail)


def parse_stylesheet(css: str) -> Stylesheet:
    segments: List[Union[AtRule, RuleChunk]] = []
    depth = 0
    start = 0
    i = 0
    n = len(css)
    while i < n:
        j = _skip_ignored(css, i)
        if j != i:
            i = j
            continue
        ch = css[i]
        if ch == '{':
            depth += 1
        elif ch == '}':
            depth = max(depth - 1, 0)
        elif ch == '@' and depth == 0:
            if i > start:
                segments.append(RuleChunk(css[start:i]))
            at_rule, i = _read_at_rule(css, i)
            segments.append(at_rule)
            start = i
            continue
        i += 1
    if start < n:
        segments.append(RuleChunk(css[start:]))
    return Stylesheet(segments)
