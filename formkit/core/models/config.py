"""
Config model — the contents of formkit.yml.

Every key is optional; an absent file means all defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class FormkitConfig(BaseModel):
    """Where and how generated forms are written."""

    forms_dir: str = "app/forms"
    base_model: str = "FormModel"
    package: str = ""  # import path of forms_dir; derived when empty

    @field_validator("forms_dir")
    @classmethod
    def _strip_slashes(cls, value: str) -> str:
        value = value.strip().strip("/")
        if not value:
            raise ValueError("forms_dir must not be empty")
        return value

    @property
    def forms_package(self) -> str:
        """Dotted import path of the generated forms."""
        return self.package or self.forms_dir.replace("/", ".")
