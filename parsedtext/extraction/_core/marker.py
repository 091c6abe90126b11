"""
parsedtext.extraction._core.marker
==================================
Marker grammar for tokens embedded in parsed text.

Token name format: TOKEN-{PATTERN_INDEX}-{SEQUENCE}
Marker format:     {{TOKEN-{PATTERN_INDEX}-{SEQUENCE}}}
Examples:
  {{TOKEN-0-0}}
  {{TOKEN-2-17}}
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import regex


# ── Marker pattern ────────────────────────────────────────────────────────────
# Must match EXACTLY what format_marker() produces
MARKER_RE = regex.compile(r"\{\{(TOKEN-([0-9]+)-([0-9]+))\}\}")
TOKEN_NAME_RE = regex.compile(r"TOKEN-([0-9]+)-([0-9]+)")

_OPEN   = "{{"
_CLOSE  = "}}"
_PREFIX = "TOKEN"


def token_name(pattern_index: int, sequence: int) -> str:
    """
    Build a token name.

    >>> token_name(1, 4)
    'TOKEN-1-4'
    """
    return f"{_PREFIX}-{pattern_index}-{sequence}"


def format_marker(name: str) -> str:
    """
    Wrap a token name in marker delimiters.

    >>> format_marker("TOKEN-0-0")
    '{{TOKEN-0-0}}'
    """
    return f"{_OPEN}{name}{_CLOSE}"


def parse_token_name(name: str) -> Optional[Tuple[int, int]]:
    """Return (pattern_index, sequence) for a valid token name, else None."""
    m = TOKEN_NAME_RE.fullmatch(name)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def find_markers(text: str) -> List[Tuple[str, int, int]]:
    """
    Find all markers in the given text.

    Returns
    -------
    list of (token_name, start, end)
        ``start``/``end`` delimit the whole marker including braces.
    """
    return [(m.group(1), m.start(), m.end()) for m in MARKER_RE.finditer(text)]


def count_markers(text: str) -> int:
    """Return the number of markers found in text."""
    return len(find_markers(text))


def extract_token_names(text: str) -> List[str]:
    """Return unique token names referenced in text, preserving order."""
    seen   = set()
    result = []
    for name, _, _ in find_markers(text):
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result
