"""
Optional sorting and grouping of processed customers.
"""

from collections.abc import Iterable, Mapping
from functools import cmp_to_key
from typing import Any

from models.customer import CustomerRecord, is_number, text_form

UNKNOWN_GROUP = "UNKNOWN"


def _is_nan(value: Any) -> bool:
    # NaN is the only value unequal to itself; works for float and Decimal
    return value != value


def compare_values(first: Any, second: Any) -> int:
    """
    Three-way comparison of two field values.

    None sorts before any value, numbers compare numerically (NaN after every
    other number, equal to itself) and everything else (including number vs
    text) compares by text form.
    """
    if first is None and second is None:
        return 0
    if first is None:
        return -1
    if second is None:
        return 1
    if is_number(first) and is_number(second):
        first_nan, second_nan = _is_nan(first), _is_nan(second)
        if first_nan or second_nan:
            return first_nan - second_nan
        return (first > second) - (first < second)
    first_text, second_text = text_form(first), text_form(second)
    return (first_text > second_text) - (first_text < second_text)


def sort_customers(customers: list[CustomerRecord], sort_field: str) -> list[CustomerRecord]:
    """Stable ascending sort of ``customers`` in place by ``sort_field``."""
    customers.sort(key=cmp_to_key(lambda a, b: compare_values(a.get(sort_field), b.get(sort_field))))
    return customers


def group_customers(
    customers: Iterable[Mapping[str, Any]], group_field: str
) -> dict[str, list[Mapping[str, Any]]]:
    """
    Bucket customers by the text form of ``group_field``.

    Records without the field (or with None) land in the UNKNOWN group.
    Each bucket keeps the order in which records were supplied.
    """
    grouped: dict[str, list[Mapping[str, Any]]] = {}
    for customer in customers:
        value = customer.get(group_field)
        key = text_form(value) if value is not None else UNKNOWN_GROUP
        grouped.setdefault(key, []).append(customer)
    return grouped
