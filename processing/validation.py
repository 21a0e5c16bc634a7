from collections.abc import Sequence
from typing import Any

from models.enums import ResultStatus

NO_DATA_MESSAGE = "No customer data provided"


def validate_customers(customers: Sequence[Any] | None) -> dict[str, Any] | None:
    """
    Check that a batch was supplied.

    Returns:
        An error result when the batch is absent or empty, otherwise None.
    """
    if not customers:
        return {"status": ResultStatus.ERROR.value, "message": NO_DATA_MESSAGE}
    return None
