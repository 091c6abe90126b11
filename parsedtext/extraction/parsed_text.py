"""
parsedtext.extraction.parsed_text
=================================
ParsedText — the main gateway class.
Wires together the pattern registry, the tokenizer and the tree builder.

Public API:
  get_patterns()   → list[PatternDescriptor]
  extract(text)    → ParseResult
  render(text)     → TextNode (or the input unchanged)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from parsedtext.core.data_types import ParseResult, PatternDescriptor, TextNode
from parsedtext.core.logger import StructuredLogger
from parsedtext.extraction.config.extraction_config import ExtractionConfig
from parsedtext.extraction._core.registry import PatternRegistry, resolve_patterns
from parsedtext.extraction._core.text_extraction import TextExtraction
from parsedtext.extraction._core.tree_builder import build_tree


class ParsedText:
    """
    Finds URLs, phone numbers, emails or any custom pattern in a text and
    turns it into a tree of segments carrying each pattern's metadata.

    Usage
    -----
    # Preset
    pt = ParsedText(config="default")

    # Explicit parse options
    pt = ParsedText(parse=[
        {"type": "url", "on_press": open_url},
        {"pattern": r"\\[(@[^:]+):([^\\]]+)\\]",
         "render_text": lambda s, m: f"^^{m[1]}^^"},
    ])

    result = pt.extract("see https://example.com")
    tree   = pt.render("see https://example.com")
    """

    def __init__(
        self,
        config: Union[str, Dict[str, Any], ExtractionConfig, None] = None,
        parse: Optional[List[Any]] = None,
        children_props: Optional[Dict[str, Any]] = None,
        registry: Optional[PatternRegistry] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Parameters
        ----------
        config : str, dict, ExtractionConfig, or None
            str  → preset name ("default", "chat") or path to a YAML file
            dict → raw config dict
            None → no parse options; render() passes text through
        parse : list or None
            Parse options; overrides the config's ``parse`` list.
        children_props : dict or None
            Default props for every segment; overrides the config's.
        registry : PatternRegistry or None
            Named patterns available to ``type``. Defaults to the built-ins.
        logger : StructuredLogger or None
            Defaults to a logger named "parsedtext".
        """
        self._registry = registry or PatternRegistry()

        if isinstance(config, ExtractionConfig):
            self._cfg = config
        else:
            self._cfg = ExtractionConfig(config, known_types=self._registry.names())

        self.parse_options: Optional[List[Any]] = (
            list(parse) if parse is not None else self._cfg.parse
        )
        self.children_props: Dict[str, Any] = dict(
            children_props if children_props is not None else self._cfg.children_props
        )
        self.logger = logger or StructuredLogger(
            name="parsedtext", console=self._cfg.log_console,
        )

    # ── Public API ────────────────────────────────────────────────────────────

    def get_patterns(self) -> List[PatternDescriptor]:
        """
        Resolve the parse options into PatternDescriptors.

        Raises
        ------
        ConfigurationError
            If an option names an unknown type or has no pattern.
        """
        return resolve_patterns(self.parse_options, self._registry)

    def extract(self, text: str) -> ParseResult:
        """Tokenize text with the configured patterns."""
        return TextExtraction(text, self.get_patterns(), logger=self.logger).parse()

    def render(self, text: Any) -> Union[TextNode, Any]:
        """
        Build the segment tree for text.

        When no parse options are configured, or text is not a str, the
        input is returned unchanged.
        """
        if not self.parse_options:
            return text
        if not isinstance(text, str):
            return text

        result = self.extract(text)
        tree = build_tree(result, self.children_props)
        self.logger.debug("render", tokens=len(result.tokens))
        return tree

    def __repr__(self) -> str:
        count = len(self.parse_options) if self.parse_options else 0
        return f"ParsedText(patterns={count}, registry={self._registry!r})"
