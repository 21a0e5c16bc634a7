import pandas as pd

from processing import process_customer_data
from processing.report import customers_frame, loyalty_frame, region_frame, summary_frame
from utils.logger import get_logger

logger = get_logger(__name__)


def build_sample_customers() -> list[dict]:
    return [
        {
            "id": "C001",
            "name": "John Doe",
            "age": 35,
            "region": "NORTH",
            "spending": 1200.50,
            "interactions": 25,
            "lastActive": "2023-05-15",
        },
        {
            "id": "C002",
            "name": "Jane Smith",
            "birthDate": "1980-08-22",
            "region": "SOUTH",
            "spending": 850.75,
            "interactions": 15,
            "lastActive": "2023-06-20",
        },
        {
            "id": "C003",
            "name": "Bob Johnson",
            "age": 52,
            "region": "NORTH",
            "spending": 2500.00,
            "interactions": 40,
            "lastActive": "2023-06-10",
        },
    ]


def demo_premium_customer_report():
    customers = build_sample_customers()
    options = {"sort": "true", "group": "true", "sortField": "spending"}

    result = process_customer_data(customers, "PREMIUM", 1000.0, options)
    logger.info(f"Processed {result['filteredCount']} of {result['totalCustomers']} customers")
    return result


if __name__ == "__main__":
    result = demo_premium_customer_report()
    print("Result:", result)

    with pd.option_context("display.max_columns", None, "display.width", 120):
        print("\n--- Summary ---")
        print(summary_frame(result).to_string(index=False))
        print("\n--- Customers ---")
        print(customers_frame(result).to_string(index=False))
        print("\n--- Regions ---")
        print(region_frame(result).to_string(index=False))
        print("\n--- Loyalty ---")
        print(loyalty_frame(result).to_string(index=False))
