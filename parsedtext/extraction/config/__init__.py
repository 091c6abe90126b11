"""Config package init."""
from parsedtext.extraction.config.extraction_config import ExtractionConfig
from parsedtext.extraction.config.validator import ConfigValidator
__all__ = ["ExtractionConfig", "ConfigValidator"]
