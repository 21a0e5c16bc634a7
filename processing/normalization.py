"""
In-place normalization of filtered customers and aggregate statistics.

Missing ``age``, ``spending`` and ``region`` fields are derived from
``birthDate``, ``transactions`` and ``address.region`` respectively and
written back to the record, while totals and region counts accumulate in a
single pass.
"""

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from config.config import NormalizationConfig
from models.customer import (
    get_list,
    get_mapping,
    get_number,
    get_text,
    is_number,
)
from utils.dates import DEFAULT_DATE_PATTERN, parse_date
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class NormalizationSummary:
    """Running totals gathered while normalizing a batch."""

    count: int = 0
    total_age: float = 0.0
    total_spending: float = 0.0
    regions: set[str] = field(default_factory=set)
    region_distribution: dict[str, int] = field(default_factory=dict)

    @property
    def average_age(self) -> float:
        return self.total_age / self.count if self.count else 0.0

    @property
    def average_spending(self) -> float:
        return self.total_spending / self.count if self.count else 0.0

    def add_region(self, region: str) -> None:
        self.regions.add(region)
        self.region_distribution[region] = self.region_distribution.get(region, 0) + 1


def normalize_age(
    customer: MutableMapping[str, Any],
    date_format: str,
    today: datetime,
    config: NormalizationConfig,
) -> float | None:
    """
    Resolve the customer's age, writing derived values back to ``age``.

    Age from ``birthDate`` is the difference of calendar years only.

    Returns:
        The age to aggregate, or None when the record has no age information.
    """
    age = get_number(customer, "age")
    if age is not None:
        return age

    birth_date_text = get_text(customer, "birthDate")
    if birth_date_text is None:
        return None

    try:
        birth_date = parse_date(birth_date_text, date_format)
    except ValueError:
        logger.debug(
            f"Unparseable birthDate {birth_date_text!r} for customer {customer.get('id')!r}; "
            f"using default age {config.fallback_age}"
        )
        derived_age = config.fallback_age
    else:
        derived_age = today.year - birth_date.year
    customer["age"] = derived_age
    return derived_age


def normalize_spending(customer: MutableMapping[str, Any]) -> float | None:
    """
    Resolve the customer's spending, summing ``transactions`` amounts when needed.

    Returns:
        The spending to aggregate, or None when the record has no spending information.
    """
    spending = get_number(customer, "spending")
    if spending is not None:
        return spending

    transactions = get_list(customer, "transactions")
    if transactions is None:
        return None

    derived_spending = 0.0
    for transaction in transactions:
        if isinstance(transaction, Mapping):
            amount = transaction.get("amount")
            if is_number(amount):
                derived_spending += float(amount)
    customer["spending"] = derived_spending
    return derived_spending


def normalize_region(customer: MutableMapping[str, Any], config: NormalizationConfig) -> str:
    """Resolve the customer's region, promoting ``address.region`` to the top level."""
    region = get_text(customer, "region")
    if region is not None:
        return region

    address = get_mapping(customer, "address")
    if address is not None:
        address_region = get_text(address, "region")
        if address_region is not None:
            customer["region"] = address_region
            return address_region

    return config.unknown_region


def normalize_customers(
    customers: Iterable[MutableMapping[str, Any]],
    date_format: str = DEFAULT_DATE_PATTERN,
    today: datetime | None = None,
    config: NormalizationConfig | None = None,
) -> NormalizationSummary:
    """
    Normalize each customer in place and aggregate age, spending and regions.

    Args:
        customers: Filtered customer records (mutated in place).
        date_format: Java-style pattern used to parse ``birthDate``.
        today: Reference date for age derivation. Defaults to now.
        config: Fallback values. Defaults to NormalizationConfig().

    Returns:
        NormalizationSummary: Totals, distinct regions and region counts.
    """
    config = config or NormalizationConfig()
    today = today or datetime.now()
    summary = NormalizationSummary()

    for customer in customers:
        summary.count += 1

        age = normalize_age(customer, date_format, today, config)
        if age is not None:
            summary.total_age += float(age)

        spending = normalize_spending(customer)
        if spending is not None:
            summary.total_spending += float(spending)

        summary.add_region(normalize_region(customer, config))

    return summary
