"""
Field factories — build a Field of a given type from a name and options.

    email("email", ["required"])              → ["email", "required"]
    text("code", {"max": 10, "alpha": True})  → ["max:10", "alpha"]

Options are either a list of bare option names (each meaning ``True``) or
a mapping of option name → value. They are applied in the order given,
after the type's seeded rule. Each key belongs to one handler table:

    FLAG_OPTIONS       truthy → handler(field); falsy → skipped
    ARGUMENT_OPTIONS   False / None → skipped;
                       list / tuple → handler(field, *value);
                       anything else → handler(field, value)
    VALUE_OPTIONS      always handler(field, value), value untouched

Keys without a handler become HTML attributes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Union

from formkit.core.models.field import Field, FieldType

Options = Union[Mapping[str, Any], Iterable[Any], None]


# Rules without arguments
FLAG_OPTIONS: dict[str, Callable[[Field], Field]] = {
    "required": Field.required,
    "nullable": Field.nullable,
    "confirmed": Field.confirmed,
    "date": Field.date,
    "accepted": Field.accepted,
    "active_url": Field.active_url,
    "alpha": Field.alpha,
    "alpha_dash": Field.alpha_dash,
    "alpha_num": Field.alpha_num,
    "array": Field.array,
    "bail": Field.bail,
    "boolean": Field.boolean,
    "distinct": Field.distinct,
    "email": Field.email,
    "url": Field.url,
    "numeric": Field.numeric,
    "file": Field.file,
    "image": Field.image,
}

# Rules with arguments
ARGUMENT_OPTIONS: dict[str, Callable[..., Field]] = {
    "max": Field.max,
    "maxlength": Field.maxlength,
    "min": Field.min,
    "minlength": Field.minlength,
    "pattern": Field.pattern,
    "required_if": Field.required_if,
    "required_unless": Field.required_unless,
    "required_with": Field.required_with,
    "required_with_all": Field.required_with_all,
    "required_without": Field.required_without,
    "required_without_all": Field.required_without_all,
    "same": Field.same,
    "different": Field.different,
    "size": Field.size,
    "between": Field.between,
    "digits": Field.digits,
    "digits_between": Field.digits_between,
    "dimensions": Field.dimensions,
    "exists": Field.exists,
    "date_equals": Field.date_equals,
    "date_format": Field.date_format,
    "after": Field.after,
    "after_or_equal": Field.after_or_equal,
    "before": Field.before,
    "before_or_equal": Field.before_or_equal,
}

# Attributes and options, set to the value as given
VALUE_OPTIONS: dict[str, Callable[[Field, Any], Field]] = {
    "placeholder": Field.placeholder,
    "value": Field.with_value,
    "label": Field.with_label,
    "options": Field.options,
}

OPTION_HANDLERS: dict[str, Callable[..., Field]] = {
    **FLAG_OPTIONS,
    **ARGUMENT_OPTIONS,
    **VALUE_OPTIONS,
}


def normalize_options(options: Options) -> list[tuple[str, Any]]:
    """Turn a list or mapping of options into ordered (name, value) pairs."""
    if options is None:
        return []
    if isinstance(options, Mapping):
        return list(options.items())
    if isinstance(options, str):
        return [(options, True)]

    pairs: list[tuple[str, Any]] = []
    for item in options:
        if isinstance(item, str):
            pairs.append((item, True))
        elif isinstance(item, tuple) and len(item) == 2:
            pairs.append((item[0], item[1]))
        else:
            raise TypeError(f"Unsupported field option: {item!r}")
    return pairs


def apply_options(field: Field, options: Options) -> Field:
    """Apply options to *field* in order and return it."""
    for key, value in normalize_options(options):
        if key in VALUE_OPTIONS:
            VALUE_OPTIONS[key](field, value)
        elif key in FLAG_OPTIONS:
            if value:
                FLAG_OPTIONS[key](field)
        elif key in ARGUMENT_OPTIONS:
            if value is False or value is None:
                continue
            if isinstance(value, (list, tuple)):
                ARGUMENT_OPTIONS[key](field, *value)
            else:
                ARGUMENT_OPTIONS[key](field, value)
        else:
            field.attr(key, value)
    return field


def make(field_type: FieldType | str, name: str, options: Options = None) -> Field:
    """Build a field of *field_type*: seed its rule, then apply *options*."""
    field = Field(name=name, type=FieldType(field_type))
    if field.seeded_rule:
        field.rules.append(field.seeded_rule)
    return apply_options(field, options)


def text(name: str, options: Options = None) -> Field:
    return make(FieldType.TEXT, name, options)


def email(name: str, options: Options = None) -> Field:
    return make(FieldType.EMAIL, name, options)


def url(name: str, options: Options = None) -> Field:
    return make(FieldType.URL, name, options)


def number(name: str, options: Options = None) -> Field:
    return make(FieldType.NUMBER, name, options)


def date(name: str, options: Options = None) -> Field:
    return make(FieldType.DATE, name, options)


def file(name: str, options: Options = None) -> Field:
    return make(FieldType.FILE, name, options)


def select(
    name: str,
    choices: Mapping[Any, Any] | None = None,
    options: Options = None,
) -> Field:
    """Build a select field, optionally with static value → label choices."""
    field = make(FieldType.SELECT, name, options)
    if choices:
        field.options(choices)
    return field


def password(name: str, options: Options = None) -> Field:
    return make(FieldType.PASSWORD, name, options)


def textarea(name: str, options: Options = None) -> Field:
    return make(FieldType.TEXTAREA, name, options)


def checkbox(name: str, options: Options = None) -> Field:
    return make(FieldType.CHECKBOX, name, options)


def radio(name: str, options: Options = None) -> Field:
    return make(FieldType.RADIO, name, options)


def hidden(name: str, options: Options = None) -> Field:
    return make(FieldType.HIDDEN, name, options)


def tel(name: str, options: Options = None) -> Field:
    return make(FieldType.TEL, name, options)


def time(name: str, options: Options = None) -> Field:
    return make(FieldType.TIME, name, options)


FACTORIES: dict[FieldType, Callable[..., Field]] = {
    FieldType.TEXT: text,
    FieldType.EMAIL: email,
    FieldType.URL: url,
    FieldType.NUMBER: number,
    FieldType.DATE: date,
    FieldType.FILE: file,
    FieldType.SELECT: select,
    FieldType.PASSWORD: password,
    FieldType.TEXTAREA: textarea,
    FieldType.CHECKBOX: checkbox,
    FieldType.RADIO: radio,
    FieldType.HIDDEN: hidden,
    FieldType.TEL: tel,
    FieldType.TIME: time,
}


def supported_types() -> list[str]:
    """Return the field type names that have a factory."""
    return sorted(t.value for t in FACTORIES)
