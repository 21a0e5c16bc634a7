"""
Configuration classes for the customer-processing project.
Defines per-call processing options and the constants used by normalization
and loyalty scoring in a type-safe, extensible way.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from utils.dates import DEFAULT_DATE_PATTERN


def _is_enabled(value: object) -> bool:
    return isinstance(value, str) and value.lower() == "true"


@dataclass(frozen=True)
class ProcessingOptions:
    sort_field: str = "age"
    group_field: str = "region"
    date_format: str = DEFAULT_DATE_PATTERN
    sort: bool = False
    group: bool = False

    @classmethod
    def from_mapping(cls, options: Mapping[str, str] | None) -> "ProcessingOptions":
        """Build options from the caller's text mapping; unknown keys are ignored."""
        opts = options or {}
        return cls(
            sort_field=opts.get("sortField", cls.sort_field),
            group_field=opts.get("groupField", cls.group_field),
            date_format=opts.get("dateFormat", cls.date_format),
            sort=_is_enabled(opts.get("sort")),
            group=_is_enabled(opts.get("group")),
        )


@dataclass(frozen=True)
class NormalizationConfig:
    fallback_age: int = 30  # Used when birthDate cannot be parsed
    unknown_region: str = "UNKNOWN"

    def __post_init__(self):
        if self.fallback_age < 0:
            raise ValueError("fallback_age must be non-negative")
        if not self.unknown_region:
            raise ValueError("unknown_region must be a non-empty string")


@dataclass(frozen=True)
class LoyaltyScoringConfig:
    spending_divisor: float = 100.0
    spending_weight: float = 1.5
    interaction_weight: float = 0.7
    senior_age: int = 60  # Strictly older customers get the multiplier
    senior_multiplier: float = 1.2
    gold_threshold: float = 50.0
    silver_threshold: float = 25.0

    def __post_init__(self):
        if self.spending_divisor <= 0:
            raise ValueError("spending_divisor must be positive")
        if self.gold_threshold <= self.silver_threshold:
            raise ValueError("gold_threshold must be greater than silver_threshold")


# Example usage:
# options = ProcessingOptions.from_mapping({"sort": "true", "sortField": "spending"})
# scoring = LoyaltyScoringConfig(senior_multiplier=1.5)
