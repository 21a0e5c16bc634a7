from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import patch

import pytest

from models.enums import ProcessingMode
from processing.filtering import activity_cutoff, filter_customers

NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def customers() -> list:
    return [
        {"id": "C1", "spending": 1500.0, "interactions": 30, "lastActive": "2024-06-10"},
        {"id": "C2", "spending": 999.99, "interactions": 5, "lastActive": "2024-01-01"},
        None,
        {"id": "C3", "spending": "1500", "interactions": "30", "lastActive": "not-a-date"},
        {"id": "C4", "spending": 1000, "interactions": 10},
    ]


def test_premium_keeps_numeric_spending_at_or_above_threshold(customers):
    result = filter_customers(customers, ProcessingMode.PREMIUM, 1000.0, now=NOW)
    assert [c["id"] for c in result] == ["C1", "C4"]


def test_premium_ignores_boolean_spending():
    result = filter_customers([{"id": "B", "spending": True}], "PREMIUM", 0.5, now=NOW)
    assert result == []


def test_engaged_keeps_numeric_interactions_at_or_above_threshold(customers):
    result = filter_customers(customers, "ENGAGED", 10, now=NOW)
    assert [c["id"] for c in result] == ["C1", "C4"]


def test_active_keeps_recent_and_excludes_old_and_invalid(customers):
    result = filter_customers(customers, "ACTIVE", 30, now=NOW)
    assert [c["id"] for c in result] == ["C1"]


def test_active_boundary_is_strictly_after():
    # Midnight of 2024-06-05 is exactly 10.5 days before NOW
    customer = {"id": "edge", "lastActive": "2024-06-05"}
    assert filter_customers([customer], "ACTIVE", 10.5, now=NOW) == []
    assert filter_customers([customer], "ACTIVE", 10.6, now=NOW) == [customer]


def test_active_requires_text_date():
    customers = [{"id": "X", "lastActive": datetime(2024, 6, 14)}, {"id": "Y"}]
    assert filter_customers(customers, "ACTIVE", 30, now=NOW) == []


def test_activity_cutoff_subtracts_days():
    assert activity_cutoff(NOW, 2.5) == NOW - timedelta(days=2.5)
    assert activity_cutoff(NOW, Decimal("1")) == NOW - timedelta(days=1)


def test_activity_cutoff_nan_threshold_is_now():
    assert activity_cutoff(NOW, float("nan")) == NOW


@pytest.mark.parametrize(
    "threshold,expected",
    [(1e6, datetime.min), (float("inf"), datetime.min), (-1e10, datetime.max)],
)
def test_activity_cutoff_clamps_out_of_range_thresholds(threshold, expected):
    assert activity_cutoff(NOW, threshold) == expected


@pytest.mark.parametrize(
    "threshold,kept",
    [(1e6, True), (float("inf"), True), (float("nan"), False), (-1e10, False), (float("-inf"), False)],
)
def test_active_extreme_thresholds_do_not_raise(threshold, kept):
    customer = {"id": "recent", "lastActive": "2024-06-10"}
    result = filter_customers([customer, {"id": "bad", "lastActive": "junk"}], "ACTIVE", threshold, now=NOW)
    assert result == ([customer] if kept else [])


def test_active_cutoff_computed_once_per_call(customers):
    with patch("processing.filtering.activity_cutoff", wraps=activity_cutoff) as mock_cutoff:
        filter_customers(customers, "ACTIVE", 30, now=NOW)
    mock_cutoff.assert_called_once_with(NOW, 30)


def test_cutoff_not_computed_for_other_modes(customers):
    with patch("processing.filtering.activity_cutoff") as mock_cutoff:
        filter_customers(customers, "PREMIUM", float("inf"), now=NOW)
    mock_cutoff.assert_not_called()


def test_premium_accepts_decimal_spending():
    customer = {"id": "D", "spending": Decimal("1200.50")}
    assert filter_customers([customer], "PREMIUM", 1000.0, now=NOW) == [customer]


@pytest.mark.parametrize("mode", ["DEFAULT", "premium", "", None, "UNKNOWN_MODE"])
def test_unrecognized_modes_pass_everything_through(customers, mode):
    result = filter_customers(customers, mode, 1e9, now=NOW)
    assert [c["id"] for c in result] == ["C1", "C2", "C3", "C4"]


def test_filter_returns_same_objects_in_order(customers):
    result = filter_customers(customers, "DEFAULT", 0, now=NOW)
    assert result[0] is customers[0]
    assert result[-1] is customers[-1]


@pytest.mark.parametrize(
    "mode,threshold",
    [("PREMIUM", 1000.0), ("ACTIVE", 30), ("ENGAGED", 10), ("DEFAULT", 0)],
)
def test_filtering_is_idempotent(customers, mode, threshold):
    once = filter_customers(customers, mode, threshold, now=NOW)
    twice = filter_customers(once, mode, threshold, now=NOW)
    assert twice == once
