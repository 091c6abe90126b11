"""
parsedtext.extraction._core.registry
====================================
Named pattern registry. Resolves parse options that reference a pattern
by ``type`` into PatternDescriptors.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

import regex

from parsedtext.core.data_types import PatternDescriptor
from parsedtext.core.exceptions import ConfigurationError
from parsedtext.extraction._core.patterns.builtin import BUILTIN_PATTERNS
from parsedtext.extraction._core.text_extraction import compile_pattern


class PatternRegistry:
    """
    Maps pattern names to compiled patterns.

    Starts with the built-ins (url, phone, email); ``extra`` entries and
    later ``register`` calls may add or override names.

    Usage
    -----
    registry = PatternRegistry({"hashtag": r"#\\w+"})
    registry.get("url")        # → compiled URL pattern
    registry.get("fax")        # → ConfigurationError
    """

    def __init__(self, extra: Optional[Dict[str, Any]] = None):
        self._patterns: Dict[str, Any] = dict(BUILTIN_PATTERNS)
        for name, pattern in (extra or {}).items():
            self.register(name, pattern)

    def register(self, name: str, pattern: Union[str, regex.Pattern]) -> "PatternRegistry":
        """
        Add or replace a named pattern. Returns self.

        Raises MalformedPatternError if the pattern does not compile.
        """
        if isinstance(pattern, str):
            # Compile once up front so bad patterns fail at registration
            compile_pattern(pattern)
        self._patterns[name] = pattern
        return self

    def get(self, name: str) -> Any:
        """Return the pattern registered under name."""
        try:
            return self._patterns[name]
        except KeyError:
            raise ConfigurationError(
                f"{name} is not a supported type",
                details={"supported": self.names()},
            ) from None

    def names(self) -> List[str]:
        return sorted(self._patterns)

    def __contains__(self, name: object) -> bool:
        return name in self._patterns

    def __repr__(self) -> str:
        return f"PatternRegistry(names={self.names()})"


def resolve_patterns(
    options: Optional[Iterable[Union[Dict[str, Any], PatternDescriptor]]],
    registry: Optional[PatternRegistry] = None,
) -> List[PatternDescriptor]:
    """
    Turn parse options into PatternDescriptors.

    A ``type`` key is replaced by the registry's pattern for that name;
    every other key is passed to PatternDescriptor.from_dict. Options are
    never mutated.

    Raises
    ------
    ConfigurationError
        If a ``type`` is unknown, or an option has neither type nor pattern.
    """
    registry = registry or PatternRegistry()
    descriptors: List[PatternDescriptor] = []

    for index, option in enumerate(options or []):
        if isinstance(option, PatternDescriptor):
            descriptors.append(option)
            continue

        if not isinstance(option, dict):
            raise ConfigurationError(
                "Parse option must be a dict",
                details={"index": index, "got": type(option).__name__},
            )

        resolved = {k: v for k, v in option.items() if k not in ("type", "flags")}
        if option.get("type") is not None:
            resolved["pattern"] = registry.get(option["type"])
        elif resolved.get("pattern") is None:
            raise ConfigurationError(
                "Parse option needs a 'type' or a 'pattern'",
                details={"index": index},
            )

        flags = option.get("flags")
        if flags:
            resolved["pattern"] = compile_pattern(
                resolved["pattern"], index, extra_flags=flag_value(flags),
            )

        descriptors.append(PatternDescriptor.from_dict(resolved))

    return descriptors


VALID_FLAGS: Dict[str, int] = {
    "IGNORECASE": regex.IGNORECASE,
    "MULTILINE":  regex.MULTILINE,
    "DOTALL":     regex.DOTALL,
    "VERBOSE":    regex.VERBOSE,
    "ASCII":      regex.ASCII,
    "UNICODE":    regex.UNICODE,
}


def flag_value(names: Iterable[str]) -> int:
    """OR together regex flags given by name (e.g. ["IGNORECASE", "DOTALL"])."""
    value = 0
    for name in names:
        if name not in VALID_FLAGS:
            raise ConfigurationError(
                f"Unknown regex flag: {name!r}",
                details={"valid": sorted(VALID_FLAGS)},
            )
        value |= VALID_FLAGS[name]
    return value
