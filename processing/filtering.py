"""
Mode-dependent customer filtering.

Each ProcessingMode has one predicate. Filtering keeps the original record
objects (no copies) in input order so later stages can enrich them in place.
"""

import math
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timedelta
from typing import Any

from models.customer import CustomerRecord, get_number, get_text
from models.enums import ProcessingMode
from utils.dates import DEFAULT_DATE_PATTERN, parse_date
from utils.logger import get_logger

logger = get_logger(__name__)

Predicate = Callable[[Mapping[str, Any], float, datetime], bool]


def activity_cutoff(now: datetime, threshold: float) -> datetime:
    """
    Latest-activity cutoff for ACTIVE filtering: ``now`` minus ``threshold`` days.

    NaN thresholds count as zero days. Thresholds too large for a datetime
    clamp to the earliest (positive) or latest (negative) representable time.
    """
    if math.isnan(threshold):
        return now
    try:
        return now - timedelta(days=float(threshold))
    except OverflowError:
        logger.debug(f"ACTIVE threshold {threshold!r} exceeds the date range; clamping cutoff")
        return datetime.min if threshold > 0 else datetime.max


def _is_premium(customer: Mapping[str, Any], threshold: float, cutoff: datetime) -> bool:
    spending = get_number(customer, "spending")
    return spending is not None and spending >= threshold


def _is_active(customer: Mapping[str, Any], threshold: float, cutoff: datetime) -> bool:
    last_active_text = get_text(customer, "lastActive")
    if last_active_text is None:
        return False
    try:
        last_active = parse_date(last_active_text, DEFAULT_DATE_PATTERN)
    except ValueError:
        # Invalid dates exclude the record
        logger.debug(f"Skipping customer {customer.get('id')!r}: unparseable lastActive {last_active_text!r}")
        return False
    return last_active > cutoff


def _is_engaged(customer: Mapping[str, Any], threshold: float, cutoff: datetime) -> bool:
    interactions = get_number(customer, "interactions")
    return interactions is not None and interactions >= threshold


def _include_all(customer: Mapping[str, Any], threshold: float, cutoff: datetime) -> bool:
    return True


MODE_PREDICATES: dict[ProcessingMode, Predicate] = {
    ProcessingMode.PREMIUM: _is_premium,
    ProcessingMode.ACTIVE: _is_active,
    ProcessingMode.ENGAGED: _is_engaged,
    ProcessingMode.DEFAULT: _include_all,
}


def filter_customers(
    customers: Iterable[CustomerRecord | None],
    mode: ProcessingMode | str | None,
    threshold: float,
    now: datetime | None = None,
) -> list[CustomerRecord]:
    """
    Select the customers matching the processing mode.

    Args:
        customers: Input records; None entries are skipped.
        mode: Processing mode or its name. Unrecognized names keep every record.
        threshold: Spending amount (PREMIUM), days since last activity (ACTIVE)
            or interaction count (ENGAGED).
        now: Reference time for ACTIVE filtering. Defaults to the current time.

    Returns:
        list: The matching records, same objects, original order.
    """
    resolved_mode = ProcessingMode.from_value(mode)
    predicate = MODE_PREDICATES[resolved_mode]
    cutoff = now or datetime.now()
    if resolved_mode is ProcessingMode.ACTIVE:
        cutoff = activity_cutoff(cutoff, threshold)
    return [
        customer
        for customer in customers
        if customer is not None and predicate(customer, threshold, cutoff)
    ]
