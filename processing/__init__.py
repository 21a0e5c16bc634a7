"""Customer data processing pipeline"""

from .validation import validate_customers
from .filtering import filter_customers
from .normalization import NormalizationSummary, normalize_customers
from .ordering import compare_values, group_customers, sort_customers
from .scoring import assign_tier, build_loyalty_data, calculate_loyalty_score
from .processor import process_customer_data


__all__ = [
    # Entry point
    "process_customer_data",
    # Stages
    "validate_customers",
    "filter_customers",
    "normalize_customers",
    "NormalizationSummary",
    "compare_values",
    "sort_customers",
    "group_customers",
    "calculate_loyalty_score",
    "assign_tier",
    "build_loyalty_data",
]
