"""Short name sequences used as replacement class and id names."""
from __future__ import annotations

import itertools
import string
from typing import Iterator


FIRST_CHARS = string.ascii_lowercase + string.ascii_uppercase
REST_CHARS = FIRST_CHARS + string.digits + '_-'


def iter_names(first: str = FIRST_CHARS, rest: str = REST_CHARS) -> Iterator[str]:
    """Yield every name shortest first: a, b, ..., Z, aa, ab, ...

    Names never start with a digit, underscore or hyphen so they stay valid
    CSS identifiers without escaping.
    """
    for length in itertools.count(1):
        for head in first:
            if length == 1:
                yield head
                continue
            for tail in itertools.product(rest, repeat=length - 1):
                yield head + ''.join(tail)


class NameSequence:
    """Restartable iterator over candidate names for one identifier kind."""

    def __init__(self, first: str = FIRST_CHARS, rest: str = REST_CHARS):
        self.first = first
        self.rest = rest
        self.reset()

    def reset(self) -> None:
        self._names = iter_names(self.first, self.rest)
        self.issued = 0

    def __iter__(self) -> NameSequence:
        return self

    def __next__(self) -> str:
        name = next(self._names)
        self.issued += 1
        return name
