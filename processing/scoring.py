"""
Loyalty scoring for premium customers.

score = (spending / 100) * 1.5 + interactions * 0.7, boosted by 1.2 for
customers older than 60. Tiers: above 50 GOLD, above 25 SILVER, else BRONZE.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from config.config import LoyaltyScoringConfig
from models.customer import get_number
from models.enums import LoyaltyTier
from models.loyalty import LoyaltyEntry

UNKNOWN_CUSTOMER_ID = "unknown"


def _whole_units(value: float) -> float:
    """Truncate toward zero; NaN counts as 0 and infinities pass through."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return value
    return int(value)


def calculate_loyalty_score(
    customer: Mapping[str, Any], config: LoyaltyScoringConfig | None = None
) -> float:
    config = config or LoyaltyScoringConfig()
    spending = float(get_number(customer, "spending", 0.0))
    # Interactions and age count in whole units
    interactions = _whole_units(get_number(customer, "interactions", 0))

    score = (spending / config.spending_divisor) * config.spending_weight
    score += interactions * config.interaction_weight

    age = get_number(customer, "age")
    if age is not None and _whole_units(age) > config.senior_age:
        score *= config.senior_multiplier
    return score


def assign_tier(score: float, config: LoyaltyScoringConfig | None = None) -> LoyaltyTier:
    config = config or LoyaltyScoringConfig()
    if score > config.gold_threshold:
        return LoyaltyTier.GOLD
    if score > config.silver_threshold:
        return LoyaltyTier.SILVER
    return LoyaltyTier.BRONZE


def score_customer(customer: Mapping[str, Any], config: LoyaltyScoringConfig | None = None) -> LoyaltyEntry:
    score = calculate_loyalty_score(customer, config)
    return LoyaltyEntry(
        customer_id=customer.get("id", UNKNOWN_CUSTOMER_ID),
        score=score,
        tier=assign_tier(score, config),
    )


def build_loyalty_data(
    customers: Iterable[Mapping[str, Any]], config: LoyaltyScoringConfig | None = None
) -> list[dict[str, Any]]:
    """
    Score each customer, preserving the order of ``customers``.

    Returns:
        list: One ``{"customerId", "score", "tier"}`` mapping per customer.
    """
    config = config or LoyaltyScoringConfig()
    return [score_customer(customer, config).to_dict() for customer in customers]
