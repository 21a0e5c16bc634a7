"""
Centralized Enum definitions for the project.
"""

from enum import Enum


class ProcessingMode(str, Enum):
    """Filtering/scoring strategies applied to a customer batch"""

    PREMIUM = "PREMIUM"  # Spending at or above the threshold
    ACTIVE = "ACTIVE"  # Active within the last `threshold` days
    ENGAGED = "ENGAGED"  # Interactions at or above the threshold
    DEFAULT = "DEFAULT"  # Pass-through

    @classmethod
    def from_value(cls, value: object) -> "ProcessingMode":
        """Resolve a mode name exactly; anything unrecognized falls through to DEFAULT."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        return cls.DEFAULT


class LoyaltyTier(str, Enum):
    """Loyalty tiers assigned to premium customers"""

    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"


class ResultStatus(str, Enum):
    """Outcome of a processing call"""

    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
