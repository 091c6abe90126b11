"""
parsedtext.extraction — THE BOUNDARY FILE
=========================================
Package boundary. Exports the public API only.
Everything inside _core/ is private and should NOT be imported directly.

PUBLIC API:
  parse / TextExtraction — the tokenizer
  ParsedText             — gateway: options → tokens → segment tree
  ExtractionConfig       — typed config builder
  PatternRegistry        — named patterns (url, phone, email, …)
  build_tree / reconstruct / find_markers — marker consumers
"""

from parsedtext.core.data_types import (
    Callback, ParseResult, PatternDescriptor, TextNode, Token, Value,
)
from parsedtext.core.exceptions import (
    ConfigurationError, MalformedPatternError, ParsedTextError,
)
from parsedtext.extraction.config.extraction_config import ExtractionConfig
from parsedtext.extraction.parsed_text import ParsedText
from parsedtext.extraction._core.marker import (
    MARKER_RE, extract_token_names, find_markers, format_marker,
)
from parsedtext.extraction._core.patterns.builtin import BUILTIN_PATTERNS
from parsedtext.extraction._core.registry import PatternRegistry, resolve_patterns
from parsedtext.extraction._core.text_extraction import TextExtraction, parse
from parsedtext.extraction._core.tree_builder import build_tree, reconstruct


__all__ = [
    "parse",
    "TextExtraction",
    "ParsedText",
    "ExtractionConfig",
    "PatternRegistry",
    "resolve_patterns",
    "BUILTIN_PATTERNS",
    "build_tree",
    "reconstruct",
    "find_markers",
    "extract_token_names",
    "format_marker",
    "MARKER_RE",
    "Callback",
    "ParseResult",
    "PatternDescriptor",
    "TextNode",
    "Token",
    "Value",
    "ConfigurationError",
    "MalformedPatternError",
    "ParsedTextError",
]
