"""
parsedtext.extraction.config.extraction_config
==============================================
ExtractionConfig: a typed, validated configuration object for ParsedText.
Can be initialized from:
  - A preset name string ("default", "chat")
  - A YAML file path
  - A raw dict
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from parsedtext.core.config_loader import load_config
from parsedtext.extraction.config.validator import ConfigValidator


class ExtractionConfig:
    """
    Typed configuration for ParsedText.

    Usage
    -----
    # From preset
    cfg = ExtractionConfig("default")

    # From dict
    cfg = ExtractionConfig({
        "parse": [{"type": "url", "style": "link"}, {"pattern": r"#\\w+"}],
        "children_props": {"color": "black"},
    })

    # From YAML file
    cfg = ExtractionConfig("/path/to/parse.yaml")
    """

    def __init__(
        self,
        source: Union[str, Dict[str, Any], None] = None,
        known_types: Optional[Iterable[str]] = None,
    ):
        raw = load_config(source) if source is not None else {}
        raw = ConfigValidator.validate(raw, known_types=known_types)
        self._raw = raw

        # ── Parse options ──────────────────────────────────────────────────
        parse = raw.get("parse")
        self.parse: Optional[List[Dict[str, Any]]] = (
            [dict(option) for option in parse] if parse is not None else None
        )
        self.children_props: Dict[str, Any] = dict(raw.get("children_props") or {})

        # ── Logging ────────────────────────────────────────────────────────
        logging_cfg = raw.get("logging") or {}
        self.log_console: bool = logging_cfg.get("console", False)

    def to_dict(self) -> Dict[str, Any]:
        """Return the raw config dict."""
        return dict(self._raw)

    def __repr__(self) -> str:
        count = len(self.parse) if self.parse is not None else None
        return (
            f"ExtractionConfig(parse={count}, "
            f"children_props={self.children_props!r}, "
            f"log_console={self.log_console})"
        )
