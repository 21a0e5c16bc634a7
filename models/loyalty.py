"""
Loyalty scoring dataclass for premium customer analytics.
"""

from dataclasses import dataclass
from typing import Any

from models.enums import LoyaltyTier


@dataclass(frozen=True)
class LoyaltyEntry:
    """
    Loyalty score and tier computed for one premium customer.
    """

    customer_id: Any
    score: float
    tier: LoyaltyTier

    def to_dict(self) -> dict[str, Any]:
        return {
            "customerId": self.customer_id,
            "score": self.score,
            "tier": self.tier.value,
        }
