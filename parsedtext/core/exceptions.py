"""
parsedtext.core.exceptions
==========================
All custom exceptions for the parsedtext package.
"""


class ParsedTextError(Exception):
    """Base class for all parsedtext exceptions."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message


class ConfigurationError(ParsedTextError):
    """
    Raised when parse options or a config source are unusable.

    Causes:
      - A named pattern type is not in the registry
      - A pattern descriptor has no pattern at all
      - A config dict, YAML file or preset is invalid
    """
    pass


class MalformedPatternError(ParsedTextError):
    """
    Raised when the regular-expression engine cannot compile a pattern.
    The original ``regex.error`` is chained as ``__cause__``.
    """
    pass
