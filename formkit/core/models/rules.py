"""
Rule tokens — the units a field hands to the host validator.

A token is either a plain string (``"required"``, ``"min:10"``) or a
structured :class:`Rule`. Structured rules render to the same flat string
form but keep their parts, so the validator can inspect them:

    ExistsRule(table="users", column="id")   → exists:users,id
    InRule(values=["a", "b"])                → in:"a","b"
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Literal, Union

from pydantic import BaseModel, Field


def format_value(value: Any) -> str:
    """Render a rule argument the way the validator reads it.

    Booleans become ``1``/``0``; everything else goes through ``str()``.
    """
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _quote(value: Any) -> str:
    return '"' + format_value(value).replace('"', '""') + '"'


class Rule(BaseModel):
    """Base for structured rule objects.

    Subclasses set ``kind`` and override ``__str__`` to add their
    arguments; a bare rule renders as its kind. A rule compares equal to
    its flat string form, so lists mixing literals and rule objects can be
    asserted against plain strings.
    """

    kind: str = ""

    @property
    def name(self) -> str:
        """Rule name — the part before the first ``:``."""
        return str(self).split(":", 1)[0]

    def __str__(self) -> str:
        return self.kind

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        return super().__eq__(other)


class WhereClause(BaseModel):
    """A column constraint rendered into a database rule."""

    column: str
    value: Any = None


class ExistsRule(Rule):
    """The value must exist in ``table.column``.

    Extra constraints added with :meth:`where` and friends are rendered
    after the column. Query callbacks recorded with :meth:`using` are not
    part of the string form; the host applies them to its own query
    builder through :meth:`apply_queries`.
    """

    kind: Literal["exists"] = "exists"
    table: str
    column: str = "NULL"
    wheres: list[WhereClause] = Field(default_factory=list)
    queries: list[Callable[[Any], Any]] = Field(default_factory=list)

    def where(self, column: str | Callable[[Any], Any], value: Any = None) -> ExistsRule:
        if callable(column):
            return self.using(column)
        self.wheres.append(WhereClause(column=column, value=value))
        return self

    def where_not(self, column: str, value: Any) -> ExistsRule:
        return self.where(column, "!" + format_value(value))

    def where_null(self, column: str) -> ExistsRule:
        return self.where(column, "NULL")

    def where_not_null(self, column: str) -> ExistsRule:
        return self.where(column, "NOT_NULL")

    def using(self, callback: Callable[[Any], Any]) -> ExistsRule:
        """Record a query refinement for the host's query builder."""
        self.queries.append(callback)
        return self

    def apply_queries(self, query: Any) -> Any:
        """Run every recorded refinement against *query* and return it."""
        for callback in self.queries:
            callback(query)
        return query

    def __str__(self) -> str:
        wheres = ",".join(f"{w.column},{_quote(w.value)}" for w in self.wheres)
        return f"exists:{self.table},{self.column},{wheres}".rstrip(",")


class InRule(Rule):
    """The value must be one of ``values``."""

    kind: Literal["in"] = "in"
    values: list[Any] = Field(default_factory=list)

    @classmethod
    def of(cls, values: Iterable[Any]) -> InRule:
        return cls(values=list(values))

    def __str__(self) -> str:
        return "in:" + ",".join(_quote(v) for v in self.values)


RuleToken = Union[str, Rule]


def rule_name(token: RuleToken) -> str:
    """Name of a token: its prefix up to the first ``:``, or all of it."""
    if isinstance(token, Rule):
        return token.name
    return token.split(":", 1)[0]
