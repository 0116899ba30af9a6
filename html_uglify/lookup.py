"""Lookup table and pointer resolution for class and id names.

A *pointer* is the generated name that replaces an original class or id.
One ``LookupTable`` lives for exactly one run; the ``PointerResolver`` decides
which pointer an original value gets and records it in the table.
"""
from __future__ import annotations

from typing import Dict, Iterable, Optional


ID = 'id'
CLASS = 'class'
KINDS = (ID, CLASS)
PREFIXES = {ID: '#', CLASS: '.'}


class LookupTable:
    """Original -> pointer mappings, one partition per kind."""

    def __init__(self):
        self._lookups: Dict[str, Dict[str, str]] = {kind: {} for kind in KINDS}

    def insert(self, kind: str, value: str, pointer: str) -> None:
        self._lookups.setdefault(kind, {})[value] = pointer

    def lookup_exact(self, kind: str, value: str) -> Optional[str]:
        return self._lookups.get(kind, {}).get(value)

    def lookup_by_substring(self, kind: str, value: str) -> Optional[str]:
        """Rewrite the first known original found inside ``value``.

        Keys are tried in insertion order and the first key occurring anywhere
        in ``value`` wins; only its first occurrence is replaced. This is what
        maps fragment references such as ``sprite.svg#icon``.
        """
        for key, pointer in self._lookups.get(kind, {}).items():
            if key in value:
                return value.replace(key, pointer, 1)
        return None

    def mapping(self, kind: str) -> Dict[str, str]:
        return dict(self._lookups.get(kind, {}))

    def __len__(self) -> int:
        return sum(len(partition) for partition in self._lookups.values())


class PointerResolver:
    def __init__(self, whitelist: Iterable[str], generators):
        self.whitelist = frozenset(whitelist)
        self.generators = generators

    def is_whitelisted(self, kind: str, value: str) -> bool:
        return f"{PREFIXES[kind]}{value}" in self.whitelist

    def generate_pointer(self, kind: str) -> str:
        # whitelisted candidates are reserved and skipped
        for candidate in self.generators[kind]:
            if not self.is_whitelisted(kind, candidate):
                return candidate
        raise RuntimeError(f"name sequence for {kind!r} is exhausted")

    def resolve(self, kind: str, value: str, lookups: LookupTable) -> str:
        return (lookups.lookup_exact(kind, value)
                or lookups.lookup_by_substring(kind, value)
                or self.generate_pointer(kind))

    def create_lookup(self, kind: str, value: Optional[str], lookups: LookupTable) -> Optional[str]:
        """Return the pointer for ``value`` and record it, or None if it must stay."""
        if not value or self.is_whitelisted(kind, value):
            return None
        pointer = self.resolve(kind, value, lookups)
        lookups.insert(kind, value, pointer)
        return pointer
