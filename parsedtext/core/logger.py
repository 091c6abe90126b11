"""
parsedtext.core.logger
======================
Structured logger for the parsedtext package.
Records operations as JSON-style entries with timestamps and context.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class StructuredLogger:
    """
    Lightweight structured logger that records operations as JSON-style dicts.

    Two output modes:
      console: prints formatted log lines to stderr
      silent:  stores entries in memory only (default)

    Usage
    -----
    logger = StructuredLogger(name="parsedtext", console=True)
    logger.log("parse", patterns=3, tokens=5)
    entries = logger.get_entries(operation="parse")
    """

    def __init__(
        self,
        name: str = "parsedtext",
        console: bool = False,
        max_entries: int = 10_000,
    ):
        self.name        = name
        self.console     = console
        self.max_entries = max_entries
        self._entries: List[Dict[str, Any]] = []

    def log(
        self,
        operation: str,
        level: str = "INFO",
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Record a structured log entry.

        Parameters
        ----------
        operation : str
            Short operation name (e.g. "parse", "pattern_applied").
        level : str
            Log level: DEBUG / INFO / WARNING / ERROR.
        **kwargs
            Additional key-value pairs to include in the entry.

        Returns
        -------
        dict
            The log entry that was recorded.
        """
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "logger":    self.name,
            "level":     level,
            "operation": operation,
            **kwargs,
        }

        # Trim oldest entries if cap exceeded
        if len(self._entries) >= self.max_entries:
            self._entries = self._entries[-(self.max_entries // 2):]

        self._entries.append(entry)

        if self.console:
            self._print_entry(entry)

        return entry

    def debug(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        return self.log(operation, level="DEBUG", **kwargs)

    def get_entries(
        self,
        operation: Optional[str] = None,
        level: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return stored log entries, optionally filtered by operation and level."""
        entries = self._entries
        if operation:
            entries = [e for e in entries if e.get("operation") == operation]
        if level:
            entries = [e for e in entries if e.get("level") == level]
        return list(entries)

    def clear(self) -> None:
        """Remove all stored log entries."""
        self._entries.clear()

    def _print_entry(self, entry: Dict[str, Any]) -> None:
        ts  = entry.get("timestamp", "")[:19]
        lvl = entry.get("level", "INFO").ljust(8)
        op  = entry.get("operation", "")
        extras = {
            k: v for k, v in entry.items()
            if k not in ("timestamp", "logger", "level", "operation")
        }
        extra_str = " " + json.dumps(extras, default=repr) if extras else ""
        print(
            f"[{ts}] {lvl} [{self.name}] {op}{extra_str}",
            file=sys.stderr,
            flush=True,
        )

    def __repr__(self) -> str:
        return (
            f"StructuredLogger(name={self.name!r}, "
            f"entries={len(self._entries)}, "
            f"console={self.console})"
        )
