"""
Field collection — the fields of one form, in declaration order.

    fields = FieldCollection()
    fields.email("email", ["required"])
    fields.select("role").options({"admin": "Admin", "user": "User"})

    fields.get_validation_rules()
    # → {"email": ["email", "required"], "role": [in:"admin","user"]}
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from formkit.core.models.field import Field, FieldType
from formkit.core.models.rules import RuleToken
from formkit.core.services import fields as factories
from formkit.core.services.fields import Options


def _collector(field_type: FieldType) -> Callable[..., Field]:
    def build(self: FieldCollection, name: str, options: Options = None) -> Field:
        return self.add(factories.make(field_type, name, options))

    build.__name__ = field_type.value
    build.__doc__ = f"Build a field of type {field_type.value!r} and add it to the collection."
    return build


class FieldCollection:
    """Ordered name → Field mapping. Adding a name twice replaces the field."""

    def __init__(self) -> None:
        self._fields: dict[str, Field] = {}

    def add(self, field: Field) -> Field:
        self._fields[field.name] = field
        return field

    def get(self, name: str) -> Field | None:
        return self._fields.get(name)

    def names(self) -> list[str]:
        return list(self._fields)

    def get_validation_rules(self) -> dict[str, list[RuleToken]]:
        """Rules of every field, keyed by field name."""
        return {name: f.get_validation_rules() for name, f in self._fields.items()}

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    # ── Factories ────────────────────────────────────────────────

    text = _collector(FieldType.TEXT)
    email = _collector(FieldType.EMAIL)
    url = _collector(FieldType.URL)
    number = _collector(FieldType.NUMBER)
    date = _collector(FieldType.DATE)
    file = _collector(FieldType.FILE)
    password = _collector(FieldType.PASSWORD)
    textarea = _collector(FieldType.TEXTAREA)
    checkbox = _collector(FieldType.CHECKBOX)
    radio = _collector(FieldType.RADIO)
    hidden = _collector(FieldType.HIDDEN)
    tel = _collector(FieldType.TEL)
    time = _collector(FieldType.TIME)

    def select(
        self,
        name: str,
        choices: Mapping[Any, Any] | None = None,
        options: Options = None,
    ) -> Field:
        return self.add(factories.select(name, choices, options))
