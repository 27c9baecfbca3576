"""Configuration resolution: flags -> env -> config file -> defaults."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "auto"
DEFAULT_CONTEXT_LINES = 3
VALID_FORMATS = ("auto", "html", "terminal")
CONFIG_DIR = Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config")) / "sidediff"
CONFIG_FILE = CONFIG_DIR / "config.toml"


@dataclass(frozen=True)
class SidediffConfig:
    """Resolved sidediff configuration."""

    output_format: str = DEFAULT_FORMAT
    context_lines: int = DEFAULT_CONTEXT_LINES


def _load_toml(path: Path) -> dict[str, Any]:
    """Load TOML config file, return empty dict if missing."""
    if not path.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib  # type: ignore[no-redef]
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception:
        logger.warning("Failed to parse config file: %s", path)
        return {}


def _resolve(
    flag_value: str | None,
    env_var: str,
    toml_value: str | None,
    default: str = "",
) -> str:
    """Resolve a config value using the precedence chain."""
    if flag_value:
        return flag_value
    env = os.getenv(env_var)
    if env:
        return env
    if toml_value:
        return toml_value
    return default


def _parse_context_lines(value: str) -> int:
    try:
        context_lines = int(value)
    except ValueError:
        logger.warning("Invalid context lines %r, using %d", value, DEFAULT_CONTEXT_LINES)
        return DEFAULT_CONTEXT_LINES
    if context_lines < 0:
        logger.warning("Negative context lines %d, using %d", context_lines, DEFAULT_CONTEXT_LINES)
        return DEFAULT_CONTEXT_LINES
    return context_lines


def resolve_config(
    *,
    output_format: str | None = None,
    context_lines: int | None = None,
    profile: str | None = None,
) -> SidediffConfig:
    """Resolve configuration from all sources.

    Resolution order: flags -> env vars -> config file -> defaults.
    """
    toml_data = _load_toml(CONFIG_FILE)

    # Determine which profile section to read
    profile_name = profile or os.getenv("SIDEDIFF_PROFILE", "default")
    if profile_name == "default":
        profile_data = toml_data.get("default", {})
    else:
        profile_data = toml_data.get("profiles", {}).get(profile_name, {})

    resolved_format = _resolve(
        output_format,
        "SIDEDIFF_FORMAT",
        profile_data.get("format"),
        default=DEFAULT_FORMAT,
    ).lower()
    if resolved_format not in VALID_FORMATS:
        logger.warning("Unknown output format %r, using %r", resolved_format, DEFAULT_FORMAT)
        resolved_format = DEFAULT_FORMAT

    toml_context = profile_data.get("context")
    resolved_context = _resolve(
        str(context_lines) if context_lines is not None else None,
        "SIDEDIFF_CONTEXT",
        str(toml_context) if toml_context is not None else None,
        default=str(DEFAULT_CONTEXT_LINES),
    )

    return SidediffConfig(
        output_format=resolved_format,
        context_lines=_parse_context_lines(resolved_context),
    )
