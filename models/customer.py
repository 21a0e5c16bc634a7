"""
Customer record model and typed accessors.

Customer records arrive as loosely structured mappings; every field is
optional and may hold a number, text, a nested mapping or a list of
mappings. The helpers below centralize the presence/type checks.
"""

from collections.abc import Mapping
from numbers import Number
from typing import Any

CustomerRecord = dict[str, Any]


def is_number(value: Any) -> bool:
    """True for numbers other than booleans and complex values."""
    return isinstance(value, Number) and not isinstance(value, (bool, complex))


def get_number(record: Mapping[str, Any], key: str, default: float | None = None) -> Any:
    """Return the numeric value stored under ``key`` or ``default``."""
    value = record.get(key)
    return value if is_number(value) else default


def get_text(record: Mapping[str, Any], key: str) -> str | None:
    """Return the text value stored under ``key`` or None."""
    value = record.get(key)
    return value if isinstance(value, str) else None


def get_mapping(record: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = record.get(key)
    return value if isinstance(value, Mapping) else None


def get_list(record: Mapping[str, Any], key: str) -> list | None:
    value = record.get(key)
    return value if isinstance(value, list) else None


def text_form(value: Any) -> str:
    """Render a field value as text, spelling booleans in lower case."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
