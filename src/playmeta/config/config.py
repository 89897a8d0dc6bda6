"""Configuration loader using TOML.

Where: src/playmeta/config/config.py
What: Define parser and application settings and load them from a TOML file.
Why: Thread separator and pattern lists as explicit values instead of module globals.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Final, cast

from playmeta.config.paths import config_path
from playmeta.platform.logging import logger

# Spaced delimiters only: "Jay-Z" and "AC/DC" must not split. Bare colon covers "Artist: Track".
DEFAULT_SEPARATORS: Final[tuple[str, ...]] = (
    " -- ",
    " ~ ",
    " - ",
    " – ",
    " — ",
    " // ",
    " | ",
    ":",
)

# Hyphen, en dash, em dash and horizontal bar, each surrounded by spaces.
DEFAULT_DASH_SEPARATORS: Final[tuple[str, ...]] = (
    " - ",
    " – ",
    " — ",
    " ― ",
)

DEFAULT_TIME_SEPARATORS: Final[tuple[str, ...]] = ("/",)

DEFAULT_DESCRIPTION_SEPARATOR: Final[str] = " · "

DEFAULT_DESCRIPTION_IGNORED_PREFIXES: Final[tuple[str, ...]] = (
    "Provided to YouTube by",
    "Released on:",
    "Lyricist:",
    "Composer:",
    "Auto-generated by YouTube",
)

# Copyright and phonogram marks drop a line wherever they appear in it.
DEFAULT_DESCRIPTION_IGNORED_MARKERS: Final[tuple[str, ...]] = ("℗", "©")

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the TOML document cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when the parsed document is semantically invalid."""


@dataclass(slots=True, frozen=True)
class ParserConfig:
    """Pattern lists consumed by the splitter and the normalizers."""

    separators: tuple[str, ...] = DEFAULT_SEPARATORS
    dash_separators: tuple[str, ...] = DEFAULT_DASH_SEPARATORS
    time_separators: tuple[str, ...] = DEFAULT_TIME_SEPARATORS
    description_separator: str = DEFAULT_DESCRIPTION_SEPARATOR
    description_ignored_prefixes: tuple[str, ...] = DEFAULT_DESCRIPTION_IGNORED_PREFIXES
    description_ignored_markers: tuple[str, ...] = DEFAULT_DESCRIPTION_IGNORED_MARKERS


@dataclass(slots=True, frozen=True)
class AppConfig:
    """Application configuration."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    log_file: Path | None = None
    log_level: str = "INFO"

    @property
    def console_level(self) -> int:
        """Return the numeric logging level for console output."""

        return logging.getLevelNamesMapping()[self.log_level]


DEFAULT_PARSER_CONFIG: Final[ParserConfig] = ParserConfig()


def load_config(
    *, path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> AppConfig:
    """Load application configuration.

    Args:
        path: Optional explicit path to the config file.
        env: Optional environment mapping to read overrides from.

    Returns:
        AppConfig: Loaded configuration, or defaults when the file is missing.
    """

    resolved_path = config_path(path, env)
    if not resolved_path.exists():
        logger.debug("No configuration file at %s, using defaults", resolved_path)
        return AppConfig()

    try:
        with resolved_path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(f"Invalid TOML in config file: {resolved_path}") from exc
    except OSError as exc:  # pragma: no cover - rare filesystem failure
        raise ConfigError(f"Failed to read config file: {resolved_path}") from exc

    parser_config = _extract_parser_config(_extract_table(document, "parser"))
    log_file, log_level = _extract_logging(_extract_table(document, "logging"))

    logger.info("Configuration loaded from %s", resolved_path)
    return AppConfig(parser=parser_config, log_file=log_file, log_level=log_level)


def _extract_table(document: Mapping[str, Any], section: str) -> dict[str, Any]:
    table = document.get(section, {})
    if not isinstance(table, dict):
        raise ConfigValidationError(f"{section} section must be a table")
    return cast(dict[str, Any], table)


def _extract_parser_config(table: Mapping[str, Any]) -> ParserConfig:
    known = {f.name for f in fields(ParserConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigValidationError(f"Unknown parser settings: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key, value in table.items():
        if key == "description_separator":
            if not isinstance(value, str) or not value:
                raise ConfigValidationError("description_separator must be a non-empty string")
            values[key] = value
        else:
            values[key] = _string_tuple(value, key=key)
    return ParserConfig(**values)


def _string_tuple(value: Any, *, key: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ConfigValidationError(f"{key} must be a non-empty list of strings")

    items = cast(list[object], value)
    result: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item:
            raise ConfigValidationError(f"{key} entries must be non-empty strings")
        result.append(item)
    return tuple(result)


def _extract_logging(table: Mapping[str, Any]) -> tuple[Path | None, str]:
    raw_file = table.get("log_file")
    log_file: Path | None = None
    if raw_file is not None:
        if not isinstance(raw_file, str):
            raise ConfigValidationError("log_file must be a string")
        log_file = Path(raw_file).expanduser() if raw_file.strip() else None

    raw_level = table.get("level", "INFO")
    if not isinstance(raw_level, str) or raw_level.upper() not in _LOG_LEVELS:
        raise ConfigValidationError(f"Unsupported log level: {raw_level!r}")
    return log_file, raw_level.upper()


__all__ = [
    "AppConfig",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "DEFAULT_DASH_SEPARATORS",
    "DEFAULT_DESCRIPTION_IGNORED_MARKERS",
    "DEFAULT_DESCRIPTION_IGNORED_PREFIXES",
    "DEFAULT_DESCRIPTION_SEPARATOR",
    "DEFAULT_PARSER_CONFIG",
    "DEFAULT_SEPARATORS",
    "DEFAULT_TIME_SEPARATORS",
    "ParserConfig",
    "load_config",
]
