"""
Configuration loader — reads formkit.yml into a FormkitConfig.

The file is optional. When none is found, the defaults apply. A file that
exists but cannot be read, parsed or validated is an error.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from formkit.core.models.config import FormkitConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "formkit.yml"


class ConfigError(Exception):
    """Raised when formkit.yml is invalid or unreadable."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for formkit.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to formkit.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> FormkitConfig:
    """Load and validate formkit configuration.

    Args:
        path: Explicit path to formkit.yml. If None, searches upward and
            falls back to defaults when nothing is found.

    Returns:
        Validated FormkitConfig model.

    Raises:
        ConfigError: If an explicit file is missing, or a file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return FormkitConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading formkit config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # Settings may sit under a "formkit" key or at the top level
    if isinstance(data.get("formkit"), dict):
        data = data["formkit"]

    try:
        config = FormkitConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid formkit configuration: {e}") from e

    logger.info("Loaded config from %s (forms_dir=%s)", path, config.forms_dir)
    return config


def project_root(config_path: Path | None) -> Path:
    """Project root: the directory holding formkit.yml, else the cwd."""
    return config_path.parent.resolve() if config_path else Path.cwd()
