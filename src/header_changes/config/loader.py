"""
Configuration loader for header_changes.

The tool optionally reads a JSON configuration file, by default named
``.header-changes.json`` and located in the repository root. It holds
the reference remote and branch that changes are computed against and
whether reference content should be fetched.

If an explicitly given configuration file is missing, malformed, or has
fields of the wrong type, a :class:`ConfigError` is raised. Without a
configuration file the defaults apply.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


CONFIG_FILE_NAME = ".header-changes.json"

DEFAULTS: Dict[str, Any] = {
    "remote": "origin",
    "branch": "master",
    "reference_content": False,
}

_EXPECTED_TYPES = {
    "remote": str,
    "branch": str,
    "reference_content": bool,
}


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


def find_config(repo_root: Path) -> Optional[Path]:
    """Return the configuration file of ``repo_root`` if there is one."""
    config_path = repo_root / CONFIG_FILE_NAME
    if config_path.is_file():
        return config_path
    return None


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration and return it merged over the defaults.

    Args:
        config_path: Path of the JSON configuration file. When None, the
                     defaults are returned.

    Returns:
        A dictionary with keys:
        - remote (str): The remote holding the reference branch
        - branch (str): The reference branch
        - reference_content (bool): Whether to fetch reference content

    Raises:
        ConfigError: If the configuration file is missing, malformed, or invalid.
    """
    config = dict(DEFAULTS)
    if config_path is None:
        logger.debug("No configuration file, using defaults: %s", config)
        return config

    if not config_path.exists():
        logger.error("Configuration file '%s' does not exist", config_path)
        raise ConfigError(f"Missing configuration file: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    for key, value in data.items():
        expected = _EXPECTED_TYPES.get(key)
        if expected is None:
            logger.debug("Ignoring unknown configuration key: %s", key)
            continue
        if not isinstance(value, expected):
            raise ConfigError(f"'{key}' must be a {expected.__name__}")
        config[key] = value

    if not config["remote"] or not config["branch"]:
        raise ConfigError("'remote' and 'branch' must not be empty")

    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config
