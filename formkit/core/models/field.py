"""
Field model — one form input and the validation rules it implies.

A Field accumulates rule tokens through chained calls:

    number("age").min(18).max(99).required()
    # → ["numeric", "min:18", "max:99", "required"]

Rules keep call order and are never deduplicated. The rule implied by the
field type (``numeric`` above) is seeded at index 0 by the factories in
``formkit.core.services.fields``.

HTML attributes, the value and the label live beside the rules and never
leak into them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field as PydanticField, PrivateAttr

from formkit.core.models.rules import (
    ExistsRule,
    InRule,
    RuleToken,
    format_value,
    rule_name,
)

logger = logging.getLogger(__name__)


class FieldType(str, Enum):
    """Input types with a factory in ``formkit.core.services.fields``."""

    TEXT = "text"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    DATE = "date"
    FILE = "file"
    SELECT = "select"
    PASSWORD = "password"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    HIDDEN = "hidden"
    TEL = "tel"
    TIME = "time"


# Rule implied by each type, placed first in a fresh field
SEEDED_RULES: dict[FieldType, str] = {
    FieldType.EMAIL: "email",
    FieldType.URL: "url",
    FieldType.NUMBER: "numeric",
    FieldType.FILE: "file",
    FieldType.DATE: "date",
}


class TableOptions(BaseModel):
    """Select options that the host loads from a database table."""

    table: str
    label_column: str = "name"
    key_column: str = "id"
    query: Callable[[Any], Any] | None = None


class Field(BaseModel):
    """A form field with its attributes and ordered validation rules."""

    name: str
    type: FieldType = FieldType.TEXT
    value: Any = None
    label: str | None = None
    attributes: dict[str, Any] = PydanticField(default_factory=dict)
    rules: list[RuleToken] = PydanticField(default_factory=list)

    # ── Select options ───────────────────────────────────────────
    choices: dict[Any, Any] = PydanticField(default_factory=dict)
    table_options: TableOptions | None = None

    _in_rule_disabled: bool = PrivateAttr(default=False)

    @property
    def seeded_rule(self) -> str | None:
        """The rule implied by this field's type, if any."""
        return SEEDED_RULES.get(self.type)

    # ── Extraction ───────────────────────────────────────────────

    def get_validation_rules(self) -> list[RuleToken]:
        """Return the rules in order, as a new list.

        Static select choices add an ``in`` rule after the stored rules.
        It is built here on every call rather than stored.
        """
        rules = list(self.rules)
        if self.choices and not self._in_rule_disabled:
            rules.append(InRule.of(self.choices.keys()))
        return rules

    def disable_rules(self, *names: str | list[str] | tuple[str, ...]) -> Field:
        """Remove rules by name, or every rule when called without names.

        ``disable_rules("min", "max")``, ``disable_rules(["min", "max"])`` and
        ``disable_rules(["min"], "max")`` are equivalent. Names that match
        nothing are ignored, so an empty list removes nothing.
        """
        if not names:
            logger.debug("Field '%s': disabling all %d rule(s)", self.name, len(self.rules))
            self.rules.clear()
            self._in_rule_disabled = True
            return self

        wanted: set[str] = set()
        for name in names:
            if isinstance(name, (list, tuple)):
                wanted.update(name)
            else:
                wanted.add(name)
        kept = [r for r in self.rules if rule_name(r) not in wanted]
        logger.debug(
            "Field '%s': disabled %s (%d rule(s) removed)",
            self.name, ", ".join(sorted(wanted)), len(self.rules) - len(kept),
        )
        self.rules[:] = kept
        if "in" in wanted:
            self._in_rule_disabled = True
        return self

    # ── Attributes ───────────────────────────────────────────────

    def attr(self, name: str, value: Any = True) -> Field:
        """Set an HTML attribute."""
        self.attributes[name] = value
        return self

    def placeholder(self, text: str) -> Field:
        return self.attr("placeholder", text)

    def with_value(self, value: Any) -> Field:
        self.value = value
        return self

    def with_label(self, text: str) -> Field:
        self.label = text
        return self

    # ── Options ──────────────────────────────────────────────────

    def options(self, choices: Mapping[Any, Any] | None) -> Field:
        """Use a static value → label mapping as the select options."""
        self.choices = dict(choices or {})
        self.table_options = None
        self._in_rule_disabled = False
        return self

    def from_table(
        self,
        table: str,
        label_column: str = "name",
        key_column: str = "id",
        query: Callable[[Any], Any] | None = None,
    ) -> Field:
        """Load the select options from ``table``.

        The options themselves are resolved by the host; the field records
        where they come from and requires the submitted value to exist in
        ``table.key_column``.
        """
        self.table_options = TableOptions(
            table=table,
            label_column=label_column,
            key_column=key_column,
            query=query,
        )
        self.choices = {}
        exists = ExistsRule(table=table, column=key_column)
        if query is not None:
            exists.using(query)
        return self.rule(exists)

    # ── Rules ────────────────────────────────────────────────────

    def rule(self, token: RuleToken) -> Field:
        """Append any rule token, literal or structured."""
        self.rules.append(token)
        return self

    def _rule(self, name: str, *args: Any) -> Field:
        if not args:
            return self.rule(name)
        return self.rule(f"{name}:" + ",".join(format_value(a) for a in args))

    def required(self) -> Field:
        return self._rule("required")

    def nullable(self) -> Field:
        return self._rule("nullable")

    def max(self, value: Any) -> Field:
        return self._rule("max", value)

    def maxlength(self, value: Any) -> Field:
        return self.max(value)

    def min(self, value: Any) -> Field:
        return self._rule("min", value)

    def minlength(self, value: Any) -> Field:
        return self.min(value)

    def pattern(self, regex: str) -> Field:
        return self.rule(f"regex:/{regex}/")

    def required_if(self, field: str, value: Any) -> Field:
        return self._rule("required_if", field, value)

    def required_unless(self, field: str, operator: str, value: Any) -> Field:
        return self._rule("required_unless", field, operator, value)

    def required_with(self, *fields: str) -> Field:
        return self._rule("required_with", *fields)

    def required_with_all(self, *fields: str) -> Field:
        return self._rule("required_with_all", *fields)

    def required_without(self, *fields: str) -> Field:
        return self._rule("required_without", *fields)

    def required_without_all(self, *fields: str) -> Field:
        return self._rule("required_without_all", *fields)

    def same(self, field: str) -> Field:
        return self._rule("same", field)

    def different(self, field: str) -> Field:
        return self._rule("different", field)

    def confirmed(self) -> Field:
        return self._rule("confirmed")

    def size(self, value: Any) -> Field:
        return self._rule("size", value)

    def between(self, low: Any, high: Any) -> Field:
        return self._rule("between", low, high)

    def digits(self, value: Any) -> Field:
        return self._rule("digits", value)

    def digits_between(self, low: Any, high: Any) -> Field:
        return self._rule("digits_between", low, high)

    def dimensions(self, constraints: Mapping[str, Any]) -> Field:
        """Image dimension constraints, e.g. ``{"min_width": 100}``."""
        pairs = "".join(f"{k}={format_value(v)}," for k, v in constraints.items())
        return self.rule(f"dimensions:{pairs}")

    def exists(self, table: str, column: str) -> Field:
        return self._rule("exists", table, column)

    # Dates

    def date(self) -> Field:
        return self._rule("date")

    def date_equals(self, date: str) -> Field:
        return self._rule("date_equals", date)

    def date_format(self, fmt: str) -> Field:
        return self._rule("date_format", fmt)

    def after(self, date: str) -> Field:
        return self._rule("after", date)

    def after_or_equal(self, date: str) -> Field:
        return self._rule("after_or_equal", date)

    def before(self, date: str) -> Field:
        return self._rule("before", date)

    def before_or_equal(self, date: str) -> Field:
        return self._rule("before_or_equal", date)

    # Flags

    def accepted(self) -> Field:
        return self._rule("accepted")

    def active_url(self) -> Field:
        return self._rule("active_url")

    def alpha(self) -> Field:
        return self._rule("alpha")

    def alpha_dash(self) -> Field:
        return self._rule("alpha_dash")

    def alpha_num(self) -> Field:
        return self._rule("alpha_num")

    def array(self) -> Field:
        return self._rule("array")

    def bail(self) -> Field:
        return self._rule("bail")

    def boolean(self) -> Field:
        return self._rule("boolean")

    def distinct(self) -> Field:
        return self._rule("distinct")

    def email(self) -> Field:
        return self._rule("email")

    def url(self) -> Field:
        return self._rule("url")

    def numeric(self) -> Field:
        return self._rule("numeric")

    def file(self) -> Field:
        return self._rule("file")

    def image(self) -> Field:
        return self._rule("image")
