"""parsedtext.core — Foundation layer for the parsedtext package."""

from parsedtext.core.data_types import (
    Callback,
    ParseResult,
    PatternDescriptor,
    TextNode,
    Token,
    Value,
)
from parsedtext.core.exceptions import (
    ConfigurationError,
    MalformedPatternError,
    ParsedTextError,
)
from parsedtext.core.config_loader import load_config
from parsedtext.core.logger import StructuredLogger

__all__ = [
    "Callback",
    "ParseResult",
    "PatternDescriptor",
    "TextNode",
    "Token",
    "Value",
    "ConfigurationError",
    "MalformedPatternError",
    "ParsedTextError",
    "load_config",
    "StructuredLogger",
]
