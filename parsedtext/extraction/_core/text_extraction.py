"""
parsedtext.extraction._core.text_extraction
===========================================
The tokenizer. Applies an ordered list of patterns to a text, replacing
each match with a {{TOKEN-i-n}} marker and recording the matched text
plus the pattern's metadata as a Token.

Patterns run in priority order. Each pattern sweeps every token created
so far (in creation order) and then the top-level text, so a later
pattern can match inside text an earlier pattern already extracted.
Markers already in a span are never cut by a later match.
"""

from __future__ import annotations

import functools
import itertools
import re
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Union

import regex

from parsedtext.core.data_types import (
    Callback, ParseResult, PatternDescriptor, Token, Value,
)
from parsedtext.core.exceptions import ConfigurationError, MalformedPatternError
from parsedtext.core.logger import StructuredLogger
from parsedtext.extraction._core.marker import MARKER_RE, format_marker, token_name


PatternLike = Union[PatternDescriptor, Dict[str, Any]]

# stdlib re flag → regex flag (the numeric values are not all the same)
_RE_FLAG_MAP = {
    re.IGNORECASE: regex.IGNORECASE,
    re.MULTILINE:  regex.MULTILINE,
    re.DOTALL:     regex.DOTALL,
    re.VERBOSE:    regex.VERBOSE,
    re.ASCII:      regex.ASCII,
    re.UNICODE:    regex.UNICODE,
}


class _Span:
    """The top-level text, swept like any token's text."""

    def __init__(self, text: str):
        self.text = text


class TextExtraction:
    """
    Tokenizes a text against an ordered list of patterns.

    Parameters
    ----------
    text : str
        Text to be parsed.
    patterns : list of PatternDescriptor or dict, or None
        Patterns in priority order. Dicts are converted with
        PatternDescriptor.from_dict.
    logger : StructuredLogger or None
        Receives one DEBUG entry per pattern and one INFO entry per parse.

    Usage
    -----
    result = TextExtraction("hello foo", [{"pattern": r"foo"}]).parse()
    result.text                       # → "hello {{TOKEN-0-0}}"
    result.tokens["TOKEN-0-0"].text   # → "foo"
    """

    def __init__(
        self,
        text: str,
        patterns: Optional[Sequence[PatternLike]] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.text     = text
        self.patterns: List[PatternDescriptor] = [
            _as_descriptor(p) for p in (patterns or [])
        ]
        self._logger  = logger

    def parse(self) -> ParseResult:
        """
        Return the marker-substituted text and the flat map of tokens.

        Raises
        ------
        ConfigurationError
            If a descriptor has no usable pattern.
        MalformedPatternError
            If the regular-expression engine rejects a pattern.
        """
        tokens: Dict[str, Token] = {}
        root    = _Span(self.text)
        counter = itertools.count()

        for pattern_index, descriptor in enumerate(self.patterns):
            compiled = compile_pattern(descriptor.pattern, pattern_index)
            replace  = _replacer(descriptor, pattern_index, tokens, counter)
            created_before = len(tokens)

            # Existing tokens first, in creation order, then the top-level
            # text. Tokens created during this sweep are not revisited.
            for span in _active_spans(tokens, root):
                span.text = _sweep(compiled, span.text, replace)

            if self._logger is not None:
                self._logger.debug(
                    "pattern_applied",
                    pattern_index  = pattern_index,
                    tokens_created = len(tokens) - created_before,
                )

        if self._logger is not None:
            self._logger.log(
                "parse",
                patterns = len(self.patterns),
                tokens   = len(tokens),
            )

        return ParseResult(text=root.text, tokens=tokens)


def parse(
    text: str,
    patterns: Optional[Sequence[PatternLike]] = None,
    logger: Optional[StructuredLogger] = None,
) -> ParseResult:
    """Shortcut for ``TextExtraction(text, patterns, logger).parse()``."""
    return TextExtraction(text, patterns, logger=logger).parse()


def compile_pattern(
    pattern: Any,
    pattern_index: Optional[int] = None,
    extra_flags: int = 0,
) -> "regex.Pattern":
    """
    Compile a pattern for all-occurrences, multi-line matching.

    Compiled patterns keep their own flags; MULTILINE and extra_flags
    are added.

    Raises
    ------
    ConfigurationError
        If pattern is None or not a string / compiled pattern.
    MalformedPatternError
        If the engine cannot compile it.
    """
    details = {} if pattern_index is None else {"pattern_index": pattern_index}

    if pattern is None:
        raise ConfigurationError("Pattern descriptor has no pattern", details=details)

    if isinstance(pattern, regex.Pattern):
        wanted = regex.MULTILINE | extra_flags
        if (pattern.flags & wanted) == wanted:
            return pattern
        source, flags = pattern.pattern, pattern.flags
    elif isinstance(pattern, re.Pattern):
        source = pattern.pattern
        flags  = 0
        for re_flag, regex_flag in _RE_FLAG_MAP.items():
            if pattern.flags & re_flag:
                flags |= regex_flag
    elif isinstance(pattern, str):
        source, flags = pattern, 0
    else:
        raise ConfigurationError(
            f"Unsupported pattern type: {type(pattern).__name__}",
            details=details,
        )

    try:
        return regex.compile(source, flags | extra_flags | regex.MULTILINE)
    except regex.error as exc:
        raise MalformedPatternError(
            f"Cannot compile pattern {source!r}: {exc}",
            details=details,
        ) from exc


# ── Helpers ───────────────────────────────────────────────────────────────────

def _as_descriptor(pattern: PatternLike) -> PatternDescriptor:
    if isinstance(pattern, PatternDescriptor):
        return pattern
    if isinstance(pattern, dict):
        return PatternDescriptor.from_dict(pattern)
    raise ConfigurationError(
        f"Pattern must be a PatternDescriptor or dict, got {type(pattern).__name__}"
    )


def _active_spans(tokens: Dict[str, Token], root: _Span) -> List[Any]:
    """Snapshot of the spans a pattern sweeps: every token, then the root."""
    return [*tokens.values(), root]


def _sweep(
    compiled: "regex.Pattern",
    text: str,
    replace: Callable[["regex.Match"], str],
) -> str:
    """
    Replace every match in one left-to-right pass.

    Matches that cut into a marker already present in text are left as
    they are; a match may still enclose whole markers.
    """
    guarded = [m.span() for m in MARKER_RE.finditer(text)]
    if not guarded:
        return compiled.sub(replace, text)

    def guarded_replace(match: "regex.Match") -> str:
        if _cuts_marker(match.span(), guarded):
            return match.group(0)
        return replace(match)

    return compiled.sub(guarded_replace, text)


def _cuts_marker(span: Tuple[int, int], guarded: List[Tuple[int, int]]) -> bool:
    start, end = span
    for m_start, m_end in guarded:
        overlaps = start < m_end and end > m_start
        encloses = start <= m_start and end >= m_end
        if overlaps and not encloses:
            return True
    return False


def _replacer(
    descriptor: PatternDescriptor,
    pattern_index: int,
    tokens: Dict[str, Token],
    counter: Iterator[int],
) -> Callable[["regex.Match"], str]:
    """Build the substitution callback for one pattern."""
    render = descriptor.render_text if callable(descriptor.render_text) else None

    def replace(match: "regex.Match") -> str:
        sequence = next(counter)
        name     = token_name(pattern_index, sequence)
        matched  = match.group(0)

        if render is not None:
            groups = (matched,) + match.groups()
            text = str(render(matched, groups))
        else:
            text = matched

        tokens[name] = Token(
            name          = name,
            text          = text,
            props         = _bind_props(descriptor, text, pattern_index),
            pattern_index = pattern_index,
            sequence      = sequence,
        )
        return format_marker(name)

    return replace


def _bind_props(
    descriptor: PatternDescriptor,
    text: str,
    pattern_index: int,
) -> Dict[str, Any]:
    props: Dict[str, Any] = {}
    for key, entry in descriptor.metadata.items():
        if isinstance(entry, Callback):
            props[key] = _bind_callback(entry.func, text, pattern_index)
        elif isinstance(entry, Value):
            props[key] = entry.value
        else:
            raise ConfigurationError(
                f"Metadata {key!r} must be a Value or Callback",
                details={"pattern_index": pattern_index, "got": type(entry).__name__},
            )
    return props


def _bind_callback(func: Callable, text: str, pattern_index: int) -> Callable[..., Any]:
    """Wrap func so any call becomes func(text, pattern_index)."""
    @functools.wraps(func)
    def bound(*_args: Any, **_kwargs: Any) -> Any:
        return func(text, pattern_index)

    return bound
