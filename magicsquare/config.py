"""Settings for the magic square command line tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from magicsquare.errors import InvalidInputError
from magicsquare.families import require_positive_int

ENV_PREFIX = "MAGICSQUARE_"
OUTPUT_FORMATS = ("html", "text", "json", "csv", "table")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# YAML key -> dataclass field
_YAML_KEYS = {
    "order": "order",
    "format": "output_format",
    "default_style": "use_default_style",
    "table_class": "table_class",
    "log_level": "log_level",
}


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    key = str(value).strip().lower()
    if key in {"1", "true", "yes", "on"}:
        return True
    if key in {"0", "false", "no", "off"}:
        return False
    raise InvalidInputError(f"{name} must be a boolean, got {value!r}")


def _parse_order(value: Any) -> int:
    if isinstance(value, str):
        try:
            value = int(value.strip(), 10)
        except ValueError as exc:
            raise InvalidInputError(f"order must be a positive integer, got {value!r}") from exc
    return require_positive_int(value, "order")


@dataclass(frozen=True)
class MagicConfig:
    """Defaults used by the CLI when options are omitted."""

    order: int = 8
    output_format: str = "html"
    use_default_style: bool = True
    table_class: str = ""
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidInputError(
                f"format must be one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}"
            )
        if self.log_level not in LOG_LEVELS:
            raise InvalidInputError(f"Unknown log level {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], base: Optional["MagicConfig"] = None) -> "MagicConfig":
        unknown = sorted(set(data) - set(_YAML_KEYS))
        if unknown:
            raise InvalidInputError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: dict = {}
        if "order" in data:
            values["order"] = _parse_order(data["order"])
        if "format" in data:
            values["output_format"] = str(data["format"]).strip().lower()
        if "default_style" in data:
            values["use_default_style"] = _parse_bool(data["default_style"], "default_style")
        if "table_class" in data:
            values["table_class"] = "" if data["table_class"] is None else str(data["table_class"])
        if "log_level" in data:
            values["log_level"] = str(data["log_level"]).strip().upper()
        return replace(base or cls(), **values)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MagicConfig":
        env = os.environ if environ is None else environ
        data = {
            key: env[ENV_PREFIX + key.upper()]
            for key in _YAML_KEYS
            if ENV_PREFIX + key.upper() in env
        }
        return cls.from_mapping(data)

    @classmethod
    def from_yaml(cls, path: Path, base: Optional["MagicConfig"] = None) -> "MagicConfig":
        with path.open("r", encoding="utf-8") as handle:
            try:
                payload = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise InvalidInputError(f"Invalid YAML in {path}: {exc}") from exc
            except UnicodeDecodeError as exc:
                raise InvalidInputError(f"{path} is not UTF-8 text") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise InvalidInputError(f"{path} must contain a mapping of settings")
        return cls.from_mapping(payload, base=base)


def load_config(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> MagicConfig:
    """Build settings from the environment, overlaid with ``path`` when given."""

    config = MagicConfig.from_env(environ)
    if path is not None:
        config = MagicConfig.from_yaml(path, base=config)
    return config


__all__ = ["ENV_PREFIX", "LOG_LEVELS", "MagicConfig", "OUTPUT_FORMATS", "load_config"]
