"""
Domain models — Pydantic types for formkit.

All models are re-exported here for convenient access:

    from formkit.core.models import Field, FieldType, ExistsRule, InRule
"""

from formkit.core.models.config import FormkitConfig
from formkit.core.models.field import SEEDED_RULES, Field, FieldType, TableOptions
from formkit.core.models.rules import (
    ExistsRule,
    InRule,
    Rule,
    RuleToken,
    WhereClause,
    format_value,
    rule_name,
)
from formkit.core.models.template import GeneratedFile

__all__ = [
    # rules.py
    "ExistsRule",
    # field.py
    "Field",
    "FieldType",
    # config.py
    "FormkitConfig",
    # template.py
    "GeneratedFile",
    "InRule",
    "Rule",
    "RuleToken",
    "SEEDED_RULES",
    "TableOptions",
    "WhereClause",
    "format_value",
    "rule_name",
]
