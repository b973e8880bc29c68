from decimal import Decimal

from casedesk.services.financials import aggregate_financials, calculate_balance_due, mileage_total


def test_aggregate_treats_missing_figures_as_zero():
    bills = [
        {"amount_billed": "1000.00", "insurance_paid": None, "medpay_paid": "50"},
        {"amount_billed": None, "insurance_paid": "200.10", "pi_expense": "abc"},
        {},
    ]
    totals = aggregate_financials(bills)
    assert totals.total_billed == Decimal("1000.00")
    assert totals.total_insurance_paid == Decimal("200.10")
    assert totals.total_medpay_paid == Decimal("50.00")
    assert totals.total_expense == Decimal("0.00")
    assert totals.mileage_total == Decimal("0.00")


def test_aggregate_is_order_independent():
    bills = [{"amount_billed": "0.10"}, {"amount_billed": "0.20"}, {"amount_billed": "1234.56"}]
    assert aggregate_financials(bills) == aggregate_financials(list(reversed(bills)))


def test_empty_case_totals_are_zero():
    totals = aggregate_financials([])
    assert totals.total_billed == Decimal("0.00")
    assert totals.total_balance_due == Decimal("0.00")


def test_balance_due_subtracts_credits():
    bill = {
        "amount_billed": "1000",
        "insurance_paid": "300",
        "insurance_adjusted": "100",
        "medpay_paid": "50",
        "patient_paid": "25",
        "reduction_amount": "25",
        "pi_expense": "0",
    }
    assert calculate_balance_due(bill) == Decimal("500.00")


def test_balance_due_floors_at_zero():
    assert calculate_balance_due({"amount_billed": "100", "insurance_paid": "150"}) == Decimal("0.00")


def test_mileage_total_sums_entry_totals():
    assert mileage_total([{"total": "14.00"}, {"total": None}, {"total": "7.35"}]) == Decimal("21.35")
