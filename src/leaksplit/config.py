# SPDX-License-Identifier: MIT
"""
Configuration loader for leaksplit.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from leaksplit.core.exceptions import ConfigError
from leaksplit.core.findings import SCHEMAS
from leaksplit.render.output import OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".leaksplit.yml", ".leaksplit.yaml"]

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# key -> allowed values
_CHOICES = {
    "format": [fmt.value for fmt in OutputFormat],
    "schema": list(SCHEMAS),
    "log_level": LOG_LEVELS,
}
_BOOLEAN_KEYS = ["unique", "sort", "redact"]


def load_config(config_path: Optional[str] = None, search_dir: str = ".") -> Dict[str, Any]:
    """
    Load leaksplit configuration following the search order.

    Args:
        config_path: Explicit config path from the --config CLI flag
        search_dir: Directory searched for .leaksplit.yml/.leaksplit.yaml

    Returns:
        Dictionary containing the configuration with defaults applied

    Raises:
        ConfigError: If the config is malformed or an explicit config is missing
    """
    # 1. If CLI --config provided -> load it
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.is_file():
            raise ConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path),
            )
        return _load_yaml_config(config_abs_path)

    # 2. Look for .leaksplit.yml or .leaksplit.yaml
    search_path = Path(search_dir).resolve()
    for config_name in CONFIG_FILENAMES:
        config_file = search_path / config_name
        if config_file.is_file():
            return _load_yaml_config(config_file)

    # 3. Use built-in defaults
    logger.debug("using default configuration")
    return get_default_config()


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate a YAML config file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config file: {e}", config_path=str(config_path)) from e

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError("Config must be a mapping", config_path=str(config_path))

    _validate_config(config, config_path)
    logger.info("loaded config: %s", config_path)
    return _apply_defaults(config)


def _validate_config(config: Dict[str, Any], config_path: Path) -> None:
    """Reject unknown keys and values of the wrong type."""
    defaults = get_default_config()
    for key, value in config.items():
        if key not in defaults:
            raise ConfigError(f"Unknown config key: {key}", config_path=str(config_path), key=str(key))

        if key in _BOOLEAN_KEYS:
            if not isinstance(value, bool):
                raise ConfigError(
                    f"Expected true or false, got {value!r}",
                    config_path=str(config_path),
                    key=key,
                )
        elif key in _CHOICES:
            if key == "log_level" and isinstance(value, str):
                value = value.upper()
                config[key] = value
            if value not in _CHOICES[key]:
                raise ConfigError(
                    f"Expected one of {', '.join(_CHOICES[key])}, got {value!r}",
                    config_path=str(config_path),
                    key=key,
                )


def _apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Fill in every key missing from the config."""
    for key, value in get_default_config().items():
        config.setdefault(key, value)
    return config


def get_default_config() -> Dict[str, Any]:
    """
    Get the default configuration.

    Returns:
        Dictionary with default settings
    """
    return {
        "unique": False,
        "format": OutputFormat.TEXT.value,
        "schema": "minimal",
        "sort": True,
        "redact": False,
        "log_level": "INFO",
    }


def create_default_config_template() -> str:
    """
    Create a .leaksplit.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    return """# leaksplit configuration

# Print unique findings instead of duplicates
unique: false

# Output format: text (sorted fingerprints) or json (full records)
format: text

# Finding shape: minimal (Secret, RuleID, Fingerprint) or extended
# (every gitleaks field required)
schema: minimal

# Sort fingerprints in text output
sort: true

# Redact Secret and Match values in json output
redact: false

# Diagnostics written to stderr: DEBUG, INFO, WARNING or ERROR
log_level: INFO
"""
