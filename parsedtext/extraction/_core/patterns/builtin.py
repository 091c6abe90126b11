"""
parsedtext.extraction._core.patterns.builtin
============================================
Built-in named patterns that parse options may reference by ``type``.

Covers:
  url, phone, email
"""

from __future__ import annotations

from typing import Dict

import regex


def _reg(pattern: str, flags: int = 0) -> regex.Pattern:
    return regex.compile(pattern, flags)


# ── URL ───────────────────────────────────────────────────────────────────────
# http(s):// or www. prefix, a host with a 2–6 letter TLD, optional path.
# A trailing dot is absorbed by the path class.
URL_RE = _reg(
    r"(https?://|www\.)[-a-zA-Z0-9@:%._\+~#=]{2,256}\.[a-z]{2,6}\b"
    r"([-a-zA-Z0-9@:%_\+.~#?&/=]*)",
    regex.IGNORECASE,
)


# ── Phone ─────────────────────────────────────────────────────────────────────
# Optional +, optional (area code), 3-3-4..7 digit groups.
PHONE_RE = _reg(r"[\+]?[(]?[0-9]{3}[)]?[-\s\.]?[0-9]{3}[-\s\.]?[0-9]{4,7}")


# ── Email ─────────────────────────────────────────────────────────────────────
EMAIL_RE = _reg(r"\S+@\S+\.\S+")


BUILTIN_PATTERNS: Dict[str, regex.Pattern] = {
    "url":   URL_RE,
    "phone": PHONE_RE,
    "email": EMAIL_RE,
}
