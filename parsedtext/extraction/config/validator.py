"""
parsedtext.extraction.config.validator
======================================
Config validation. Raises ConfigurationError with descriptive messages
when parse options or other sections have unsupported values.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from parsedtext.core.exceptions import ConfigurationError
from parsedtext.extraction._core.patterns.builtin import BUILTIN_PATTERNS
from parsedtext.extraction._core.registry import VALID_FLAGS


class ConfigValidator:
    """
    Validates an extraction config dict.
    All sections are optional (defaults are applied in ExtractionConfig).
    """

    @staticmethod
    def validate(
        config: Dict[str, Any],
        known_types: Optional[Iterable[str]] = None,
    ) -> Dict[str, Any]:
        """
        Validate the config dict. Returns the same dict if valid.

        Parameters
        ----------
        config : dict
            Raw config.
        known_types : iterable of str or None
            Pattern names accepted for ``type``. Defaults to the built-ins.
        """
        if not isinstance(config, dict):
            raise ConfigurationError(
                f"Config must be a dict, got {type(config).__name__}",
                details={"type": type(config).__name__},
            )

        valid_types = set(known_types) if known_types is not None else set(BUILTIN_PATTERNS)

        # ── Parse options ──────────────────────────────────────────────────
        options = config.get("parse")
        if options is not None:
            if not isinstance(options, list):
                raise ConfigurationError(
                    "parse must be a list",
                    details={"got": type(options).__name__},
                )
            for index, option in enumerate(options):
                _validate_option(option, index, valid_types)

        # ── Children props ─────────────────────────────────────────────────
        if "children_props" in config and config["children_props"] is not None:
            if not isinstance(config["children_props"], dict):
                raise ConfigurationError("children_props must be a dict")

        # ── Logging ────────────────────────────────────────────────────────
        logging_cfg = config.get("logging") or {}
        if not isinstance(logging_cfg, dict):
            raise ConfigurationError("logging must be a dict")
        if "console" in logging_cfg and not isinstance(logging_cfg["console"], bool):
            raise ConfigurationError("logging.console must be a bool")

        return config


def _validate_option(option: Any, index: int, valid_types: set) -> None:
    if not isinstance(option, dict):
        raise ConfigurationError(
            f"parse[{index}] must be a dict",
            details={"got": type(option).__name__},
        )

    has_type    = option.get("type") is not None
    has_pattern = option.get("pattern") is not None
    if has_type == has_pattern:
        raise ConfigurationError(
            f"parse[{index}] needs exactly one of 'type' or 'pattern'",
            details={"keys": sorted(option)},
        )

    if has_type and option["type"] not in valid_types:
        raise ConfigurationError(
            f"{option['type']} is not a supported type",
            details={"valid": sorted(valid_types)},
        )

    if "flags" in option:
        flags = option["flags"]
        if not isinstance(flags, list):
            raise ConfigurationError(f"parse[{index}].flags must be a list")
        bad = set(flags) - set(VALID_FLAGS)
        if bad:
            raise ConfigurationError(
                f"Unknown flag(s) in parse[{index}].flags: {sorted(bad)}",
                details={"valid": sorted(VALID_FLAGS)},
            )
