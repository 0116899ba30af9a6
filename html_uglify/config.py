"""Whitelist configuration (command line first, then environment / .env)."""
from __future__ import annotations

import os
import re
from typing import Iterable, List, Optional

from dotenv import load_dotenv

ENV_WHITELIST = 'HTML_UGLIFY_WHITELIST'

_ENTRY_RE = re.compile(r'^[#.]\S+$')


class WhitelistError(ValueError):
    pass


def parse_whitelist(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [e for e in re.split(r'[\s,]+', raw) if e]


def validate_whitelist(entries: Iterable[str]) -> List[str]:
    out = []
    for entry in entries:
        if not _ENTRY_RE.match(entry):
            raise WhitelistError(f"whitelist entry must look like #id or .class: {entry!r}")
        out.append(entry)
    return out


def load_whitelist(cli_entries: Optional[Iterable[str]] = None) -> List[str]:
    """Resolve the whitelist (CLI > env HTML_UGLIFY_WHITELIST)."""
    load_dotenv()
    entries: List[str] = []
    for item in cli_entries or []:
        entries.extend(parse_whitelist(item))
    if not entries:
        entries = parse_whitelist(os.getenv(ENV_WHITELIST))
    return validate_whitelist(entries)
