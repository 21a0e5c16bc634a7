from demos.customer_report_demo import build_sample_customers, demo_premium_customer_report


def test_sample_customers():
    customers = build_sample_customers()
    assert [c["id"] for c in customers] == ["C001", "C002", "C003"]
    assert "age" not in customers[1]


def test_demo_premium_customer_report():
    result = demo_premium_customer_report()

    assert result["status"] == "SUCCESS"
    assert result["filteredCount"] == 2
    assert [c["spending"] for c in result["customers"]] == [1200.5, 2500.0]
    assert list(result["groupedCustomers"]) == ["NORTH"]
    assert len(result["loyaltyData"]) == 2
