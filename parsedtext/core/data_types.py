"""
parsedtext.core.data_types
==========================
Core data structures used throughout the parsedtext package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Union


# ── Metadata entries ──────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Value:
    """Metadata attached to every token of a pattern verbatim."""
    value: Any


@dataclass(frozen=True)
class Callback:
    """
    Metadata attached to tokens as a bound callable.

    Whatever arguments the bound callable receives are ignored;
    ``func`` is invoked as ``func(token_text, pattern_index)``.
    """
    func: Callable[[str, int], Any]


MetaEntry = Union[Value, Callback]

RenderText = Callable[[str, Sequence[Optional[str]]], str]

# Keys of a dict-form parse option that are not metadata
RESERVED_KEYS = ("pattern", "render_text")


# ── Pattern Descriptor ────────────────────────────────────────────────────────

@dataclass
class PatternDescriptor:
    """
    One matching rule.

    Attributes:
        pattern     : Pattern string, compiled ``regex`` pattern or
                      compiled stdlib ``re`` pattern.
        render_text : Optional ``(matched_text, groups) -> str``. ``groups[0]``
                      is the full match, ``groups[k]`` capture group k.
                      Ignored when not callable.
        metadata    : Ordered ``name -> Value | Callback`` map copied onto
                      every token this pattern produces.
    """
    pattern:     Any
    render_text: Optional[RenderText]   = None
    metadata:    Dict[str, MetaEntry]   = field(default_factory=dict)

    @classmethod
    def from_dict(cls, option: Dict[str, Any]) -> "PatternDescriptor":
        """
        Build a descriptor from the open-ended dict form.

        Every key except ``pattern`` and ``render_text`` becomes metadata.
        Entries already tagged as Value/Callback are kept; any other
        callable becomes a Callback, everything else a Value.
        """
        metadata: Dict[str, MetaEntry] = {}
        for key, value in option.items():
            if key in RESERVED_KEYS:
                continue
            if isinstance(value, (Value, Callback)):
                metadata[key] = value
            elif callable(value):
                metadata[key] = Callback(value)
            else:
                metadata[key] = Value(value)

        return cls(
            pattern     = option.get("pattern"),
            render_text = option.get("render_text"),
            metadata    = metadata,
        )


# ── Token ─────────────────────────────────────────────────────────────────────

@dataclass
class Token:
    """
    One matched span.

    Attributes:
        name          : ``TOKEN-<pattern_index>-<sequence>``.
        text          : Rendered matched text. May contain markers of tokens
                        created by later patterns.
        props         : Metadata values and bound callbacks.
        pattern_index : Position of the owning pattern in the input list.
        sequence      : Global creation counter value for this parse call.
    """
    name:          str
    text:          str
    props:         Dict[str, Any] = field(default_factory=dict)
    pattern_index: int = 0
    sequence:      int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "props": dict(self.props)}


# ── Parse Result ──────────────────────────────────────────────────────────────

@dataclass
class ParseResult:
    """
    Returned by the tokenizer.

    Attributes:
        text   : Source text with every matched span replaced by its marker.
        tokens : Flat, creation-ordered map of token name → Token.
    """
    text:   str
    tokens: Dict[str, Token] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view: ``{"text": ..., "tokens": {name: {"text", "props"}}}``."""
        return {
            "text":   self.text,
            "tokens": {name: tok.to_dict() for name, tok in self.tokens.items()},
        }


# ── Presentation tree ─────────────────────────────────────────────────────────

@dataclass
class TextNode:
    """
    Node of the presentation tree built from a ParseResult.

    Leaf segments carry ``text``; container nodes carry ``children``.
    """
    name:     str
    text:     Optional[str]        = None
    props:    Dict[str, Any]       = field(default_factory=dict)
    children: List["TextNode"]     = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.text is not None

    def plain_text(self) -> str:
        """Concatenated text of all leaves under this node."""
        if self.is_leaf:
            return self.text
        return "".join(child.plain_text() for child in self.children)
