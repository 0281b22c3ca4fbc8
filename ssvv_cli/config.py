"""Configuration for the ssvv CLI.

Settings are resolved with the following precedence (highest to lowest):
1. CLI argument
2. Environment variable (SSVV_<KEY>)
3. Built-in default

There is no configuration file; the semantic model is the only input
document.

Usage:
    from ssvv_cli.config import get_setting

    output_format = get_setting("format", cli_value=cli_format)
"""

from __future__ import annotations

import os
from typing import Any

from ssvv_cli.errors import ConfigError

# Allowed values per setting
SETTING_CHOICES: dict[str, tuple[str, ...]] = {
    "color": ("auto", "always", "never"),
    "format": ("text", "json"),
}

DEFAULTS: dict[str, str] = {
    "color": "auto",
    "format": "text",
}


def _get_env_var_name(key: str) -> str:
    """Convert a setting key to environment variable name.

    Args:
        key: Setting key (e.g., "color")

    Returns:
        Environment variable name (e.g., "SSVV_COLOR")
    """
    return f"SSVV_{key.upper()}"


def _resolve(key: str, cli_value: str | None) -> tuple[str, str]:
    """Return (value, source) for a setting without checking the value."""
    if cli_value is not None:
        return cli_value, "cli"

    env_value = os.environ.get(_get_env_var_name(key))
    if env_value is not None:
        return env_value.strip().lower(), "env"

    return DEFAULTS[key], "default"


def get_setting(key: str, cli_value: str | None = None) -> str:
    """Resolve a setting with full precedence.

    Args:
        key: Setting key ("color" or "format").
        cli_value: Value passed via CLI argument (highest precedence).

    Returns:
        The resolved value.

    Raises:
        KeyError: If key is not a known setting.
        ConfigError: If the resolved value is not one of the allowed choices.
    """
    choices = SETTING_CHOICES[key]
    value, _ = _resolve(key, cli_value)
    if value not in choices:
        raise ConfigError(key, value, choices)
    return value


def list_settings(cli_values: dict[str, str | None] | None = None) -> dict[str, dict[str, Any]]:
    """List all settings with their resolved values and sources.

    Args:
        cli_values: Optional CLI argument values keyed by setting.

    Returns:
        Dict mapping setting keys to {"value": ..., "source": ...} where
        source is one of cli, env, default.
    """
    cli_values = cli_values or {}
    result: dict[str, dict[str, Any]] = {}
    for key in SETTING_CHOICES:
        value, source = _resolve(key, cli_values.get(key))
        result[key] = {"value": value, "source": source}
    return result


def color_flag(color: str) -> bool | None:
    """Map a color setting to click's ``color`` argument.

    Returns:
        None for auto (click detects the terminal), True for always,
        False for never.
    """
    return {"auto": None, "always": True, "never": False}[color]
