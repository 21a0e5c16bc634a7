"""
Tabular views of a processing result for display and export.
"""

from collections.abc import Mapping
from typing import Any

import pandas as pd

from models.enums import ResultStatus

CUSTOMER_COLUMNS = ["id", "name", "age", "region", "spending", "interactions", "lastActive"]
LOYALTY_COLUMNS = ["customerId", "score", "tier"]


def _is_success(result: Mapping[str, Any]) -> bool:
    return result.get("status") == ResultStatus.SUCCESS.value


def customers_frame(result: Mapping[str, Any], columns: list[str] | None = None) -> pd.DataFrame:
    """
    One row per processed customer, in result order.

    Known columns come first; any other fields found on the records follow.
    """
    if not _is_success(result):
        return pd.DataFrame(columns=columns or CUSTOMER_COLUMNS)
    frame = pd.DataFrame.from_records(result["customers"])
    preferred = [c for c in (columns or CUSTOMER_COLUMNS) if c in frame.columns]
    remaining = [c for c in frame.columns if c not in preferred]
    return frame[preferred + remaining]


def region_frame(result: Mapping[str, Any]) -> pd.DataFrame:
    """Customer count and share per region, largest first (ties by name)."""
    if not _is_success(result):
        return pd.DataFrame(columns=["region", "customers", "share"])
    frame = pd.DataFrame(
        sorted(result["regionDistribution"].items()), columns=["region", "customers"]
    )
    total = frame["customers"].sum()
    frame["share"] = frame["customers"] / total if total else 0.0
    return frame.sort_values(["customers", "region"], ascending=[False, True], kind="stable").reset_index(drop=True)


def loyalty_frame(result: Mapping[str, Any]) -> pd.DataFrame:
    """Loyalty entries as a table; empty outside PREMIUM mode."""
    if not _is_success(result) or "loyaltyData" not in result:
        return pd.DataFrame(columns=LOYALTY_COLUMNS)
    return pd.DataFrame(result["loyaltyData"], columns=LOYALTY_COLUMNS)


def summary_frame(result: Mapping[str, Any]) -> pd.DataFrame:
    """
    Headline statistics as a single-row DataFrame.

    Raises:
        ValueError: If the result is an error result.
    """
    if not _is_success(result):
        raise ValueError(f"Cannot summarize unsuccessful result: {result.get('message')}")
    return pd.DataFrame(
        [
            {
                "processingMode": result["processingMode"],
                "filterThreshold": result["filterThreshold"],
                "totalCustomers": result["totalCustomers"],
                "filteredCount": result["filteredCount"],
                "averageAge": result["averageAge"],
                "totalSpending": result["totalSpending"],
                "averageSpending": result["averageSpending"],
                "regionCount": len(result["regions"]),
            }
        ]
    )
