"""
Config check use case — resolve formkit.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from formkit.core.config.loader import ConfigError, find_config_file, load_config, project_root
from formkit.core.models.config import FormkitConfig
from formkit.core.services.generators.form import ScaffoldError, validate_class_name


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: FormkitConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.model_dump() if self.config else None,
            "forms_package": self.config.forms_package if self.config else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Load formkit configuration and report issues.

    Args:
        config_path: Optional explicit path to formkit.yml.

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    if config_path is None:
        result.warnings.append("No formkit.yml found. Using defaults.")

    try:
        validate_class_name(config.base_model)
    except ScaffoldError as e:
        result.errors.append(f"base_model: {e}")

    if not all(part.isidentifier() for part in config.forms_package.split(".")):
        result.warnings.append(
            f"forms_dir '{config.forms_dir}' is not an importable package path; "
            "set 'package' explicitly."
        )

    forms_dir = project_root(config_path) / config.forms_dir
    if forms_dir.exists() and not forms_dir.is_dir():
        result.errors.append(f"forms_dir exists but is not a directory: {forms_dir}")

    result.valid = not result.errors
    return result
