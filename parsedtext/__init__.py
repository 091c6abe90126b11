"""
parsedtext
==========
Recursive multi-pattern text tokenizer.

Replaces every pattern match with a {{TOKEN-i-n}} marker, keeps the
matched text and the pattern's metadata in a flat token map, and lets
later patterns match inside text earlier patterns already extracted.
"""

__version__ = "1.0.0"

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name in ("parse", "ParsedText", "TextExtraction"):
        import parsedtext.extraction as extraction
        return getattr(extraction, name)
    raise AttributeError(f"module 'parsedtext' has no attribute {name!r}")


__all__ = [
    "__version__",
]
