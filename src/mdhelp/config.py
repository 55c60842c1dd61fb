"""Load printer settings and templates from a TOML file."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .expander import TemplateError, validate_template

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the help configuration file is malformed or fails validation."""


@dataclass
class HelpConfig:
    """Settings read from a ``mdhelp`` TOML file."""

    full_width: Optional[bool] = None
    max_width: Optional[int] = None
    templates: Dict[str, str] = field(default_factory=dict)
    order: Optional[List[str]] = None
    without: Tuple[str, ...] = ()

    def apply(self, printer: Any) -> Any:
        """Apply the settings to a :class:`~mdhelp.printer.Printer` and return it."""
        if self.full_width is not None:
            printer.full_width = self.full_width
        if self.max_width is not None:
            printer.with_max_width(self.max_width)
        for key, template in self.templates.items():
            printer.set_template(key, template)
        if self.order is not None:
            printer.template_keys[:] = self.order
        for key in self.without:
            printer.without(key)
        return printer


def _coerce_bool(value: Any, dotted_key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{dotted_key} must be a boolean (use true/false).")


def _coerce_width(value: Any, dotted_key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{dotted_key} must be an integer")
    if value <= 0:
        raise ConfigError(f"{dotted_key} must be > 0")
    return value


def _coerce_keys(value: Any, dotted_key: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{dotted_key} must be a list of strings")
    return list(value)


def _table(raw: Mapping[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def parse_help_config(raw: Mapping[str, Any]) -> HelpConfig:
    """Validate an already-parsed TOML document."""

    unknown = set(raw) - {"printer", "templates"}
    if unknown:
        raise ConfigError(f"Unknown section(s): {', '.join(sorted(unknown))}")
    config = HelpConfig()

    printer = _table(raw, "printer")
    for key in printer:
        if key not in {"full_width", "max_width"}:
            raise ConfigError(f"Unknown key printer.{key}")
    if "full_width" in printer:
        config.full_width = _coerce_bool(printer["full_width"], "printer.full_width")
    if "max_width" in printer:
        config.max_width = _coerce_width(printer["max_width"], "printer.max_width")

    templates = _table(raw, "templates")
    for key, value in templates.items():
        if key == "order":
            config.order = _coerce_keys(value, "templates.order")
        elif key == "without":
            config.without = tuple(_coerce_keys(value, "templates.without"))
        elif isinstance(value, str):
            try:
                validate_template(value)
            except TemplateError as exc:
                raise ConfigError(f"templates.{key}: {exc}") from exc
            config.templates[key] = value
        else:
            raise ConfigError(f"templates.{key} must be a string")
    return config


def load_help_config(path: Path) -> HelpConfig:
    """
    Read and validate a help configuration file.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or fails validation.
    """
    try:
        with path.open("rb") as handle:
            raw = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    config = parse_help_config(raw)
    logger.debug("Loaded help config from %s: %s", path, config)
    return config


__all__ = ["ConfigError", "HelpConfig", "load_help_config", "parse_help_config"]
