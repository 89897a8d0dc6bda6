"""Shared path utilities for configuration and log locations.

Policy (portable by default):
- Config: ``<repo_root>/config/config.toml`` unless an explicit path is
  given or ``PLAYMETA_CONFIG_PATH`` is set.
- Logs: ``<repo_root>/logs/playmeta.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

ENV_CONFIG_PATH: Final[str] = "PLAYMETA_CONFIG_PATH"

_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding a root marker.

    Falls back to the current working directory.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def default_config_path() -> Path:
    """Get the default path to the main TOML config file."""

    return (_detect_repo_root() / "config" / "config.toml").resolve()


def config_path(
    explicit_path: Path | str | None = None, env: Mapping[str, str] | None = None
) -> Path:
    """Return the config file location.

    Precedence: ``explicit_path``, then ``PLAYMETA_CONFIG_PATH`` from ``env``
    (``os.environ`` when None), then :func:`default_config_path`.
    """
    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    override = (os.environ if env is None else env).get(ENV_CONFIG_PATH, "").strip()
    if override:
        return Path(override).expanduser().resolve()

    return default_config_path()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return (default_log_dir() / "playmeta.log").resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "config_path",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
