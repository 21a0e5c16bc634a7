"""
Customer data processing pipeline.

validate -> filter -> normalize/aggregate -> sort/group -> loyalty scoring

Records are never copied: customers that pass the filter are enriched in
place, so the caller's input list, ``result["customers"]`` and
``result["groupedCustomers"]`` all reference the same record objects.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from config.config import LoyaltyScoringConfig, NormalizationConfig, ProcessingOptions
from models.customer import CustomerRecord
from models.enums import ProcessingMode, ResultStatus
from processing.filtering import filter_customers
from processing.normalization import normalize_customers
from processing.ordering import group_customers, sort_customers
from processing.scoring import build_loyalty_data
from processing.validation import validate_customers
from utils.logger import get_logger

logger = get_logger(__name__)


def process_customer_data(
    customers: Sequence[CustomerRecord | None] | None,
    processing_mode: str,
    filter_threshold: float,
    options: Mapping[str, str] | None = None,
    *,
    now: datetime | None = None,
    normalization_config: NormalizationConfig | None = None,
    scoring_config: LoyaltyScoringConfig | None = None,
) -> dict[str, Any]:
    """
    Filter, normalize, summarize and (in PREMIUM mode) score a customer batch.

    Args:
        customers: Customer records. None entries are ignored.
        processing_mode: PREMIUM, ACTIVE, ENGAGED or anything else for pass-through.
        filter_threshold: Mode-dependent cutoff (spending, days, interactions).
        options: Text options: sortField, groupField, dateFormat, sort, group.
        now: Reference time for activity filtering and age derivation.
        normalization_config: Fallback values used during normalization.
        scoring_config: Loyalty formula constants and tier thresholds.

    Returns:
        dict: ``{"status": "ERROR", "message": ...}`` for an empty batch, otherwise
        the success report (counts, processed customers, statistics, regions and,
        when applicable, groupedCustomers and loyaltyData).
    """
    error = validate_customers(customers)
    if error is not None:
        logger.warning(error["message"])
        return error

    opts = ProcessingOptions.from_mapping(options)
    mode = ProcessingMode.from_value(processing_mode)
    now = now or datetime.now()

    filtered = filter_customers(customers, mode, filter_threshold, now=now)
    logger.info(
        f"Processing {len(customers)} customers in {mode.value} mode "
        f"(threshold={filter_threshold}): {len(filtered)} selected"
    )

    summary = normalize_customers(filtered, opts.date_format, today=now, config=normalization_config)

    result: dict[str, Any] = {
        "totalCustomers": len(customers),
        "filteredCount": len(filtered),
    }

    if opts.sort:
        sort_customers(filtered, opts.sort_field)

    if opts.group:
        result["groupedCustomers"] = group_customers(filtered, opts.group_field)

    result.update(
        {
            "status": ResultStatus.SUCCESS.value,
            "customers": filtered,
            "averageAge": summary.average_age,
            "totalSpending": summary.total_spending,
            "averageSpending": summary.average_spending,
            "regions": summary.regions,
            "regionDistribution": summary.region_distribution,
            "processingMode": processing_mode,
            "filterThreshold": filter_threshold,
        }
    )

    if mode is ProcessingMode.PREMIUM:
        result["loyaltyData"] = build_loyalty_data(filtered, scoring_config)

    return result
