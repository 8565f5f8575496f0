"""
Form generator — the source of a new form class and its base model.

    generate_form("UserForm", FormkitConfig())
    # → app/forms/user_form.py   (class UserForm(FormModel))
    #   app/forms/form_model.py  (class FormModel, shared by all forms)
"""

from __future__ import annotations

import re

from formkit.core.models.config import FormkitConfig
from formkit.core.models.template import GeneratedFile

_CLASS_NAME = re.compile(r"^[A-Z][A-Za-z0-9]*$")


class ScaffoldError(Exception):
    """Raised when a form cannot be generated from the given name."""


_FORM_TEMPLATE = '''\
"""
{class_name} — generated by formkit.
"""

from __future__ import annotations

from formkit.core.services.collection import FieldCollection

from {package}.{base_module} import {base_model}


class {class_name}({base_model}):
    """Fields and validation rules of the {class_name} form."""

    def setup(self, fields: FieldCollection) -> None:
        fields.text("name", ["required"]).max(255)
'''

_BASE_MODEL_TEMPLATE = '''\
"""
{base_model} — base class of the application's forms, generated by formkit.
"""

from __future__ import annotations

from formkit.core.models.rules import RuleToken
from formkit.core.services.collection import FieldCollection


class {base_model}:
    """A form made of fields that know their own validation rules.

    Subclasses declare their fields in ``setup()``.
    """

    def __init__(self) -> None:
        self.fields = FieldCollection()
        self.setup(self.fields)

    def setup(self, fields: FieldCollection) -> None:
        """Declare the form's fields on *fields*."""

    def validation_rules(self) -> dict[str, list[RuleToken]]:
        """Rules for the validator, keyed by field name."""
        return self.fields.get_validation_rules()
'''


def snake_case(name: str) -> str:
    """``UserForm`` → ``user_form``; ``HTTPForm`` → ``http_form``."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return name.lower()


def validate_class_name(name: str) -> str:
    """Return *name* stripped, or raise ScaffoldError if it is no class name."""
    name = name.strip()
    if not _CLASS_NAME.match(name):
        raise ScaffoldError(
            f"Invalid form name '{name}': use a PascalCase class name such as 'UserForm'"
        )
    return name


def generate_form(name: str, config: FormkitConfig | None = None) -> list[GeneratedFile]:
    """Generate the form module and the shared base model module.

    Args:
        name: Class name of the new form (``UserForm``).
        config: Output settings; defaults apply when omitted.

    Returns:
        ``[form_file, base_model_file]`` with paths relative to the
        project root.

    Raises:
        ScaffoldError: If *name* is not a usable class name, or clashes
            with the base model.
    """
    config = config or FormkitConfig()
    class_name = validate_class_name(name)
    base_model = validate_class_name(config.base_model)
    if class_name == base_model:
        raise ScaffoldError(f"Form name '{class_name}' clashes with the base model")

    base_module = snake_case(base_model)
    form_module = snake_case(class_name)

    form_file = GeneratedFile(
        path=f"{config.forms_dir}/{form_module}.py",
        content=_FORM_TEMPLATE.format(
            class_name=class_name,
            package=config.forms_package,
            base_module=base_module,
            base_model=base_model,
        ),
        reason=f"Form class {class_name}",
    )
    base_file = GeneratedFile(
        path=f"{config.forms_dir}/{base_module}.py",
        content=_BASE_MODEL_TEMPLATE.format(base_model=base_model),
        shared=True,
        reason=f"Base class {base_model} shared by all forms",
    )
    return [form_file, base_file]
