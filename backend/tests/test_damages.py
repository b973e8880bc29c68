from decimal import Decimal

from casedesk.services.damages import compute_damages
from casedesk.services.financials import MedicalTotals


def test_specials_are_billed_plus_adjusted_plus_mileage():
    totals = MedicalTotals(
        total_billed=Decimal("1000.00"),
        total_insurance_adjusted=Decimal("150.00"),
        mileage_total=Decimal("42.00"),
        total_insurance_paid=Decimal("999.00"),
    )
    d = compute_damages(totals)
    assert d.special_damages_total == Decimal("1192.00")
    assert d.general_damages_total == Decimal("0.00")
    assert d.total_damages == Decimal("1192.00")


def test_general_damages_sum_the_five_categories():
    general = {
        "emotional_distress": "1000",
        "duties_under_duress": "500",
        "pain_and_suffering": "2500",
        "loss_of_enjoyment": None,
        "loss_of_consortium": "250.50",
    }
    d = compute_damages(MedicalTotals(total_billed=Decimal("100.00")), general)
    assert d.general_damages_total == Decimal("4250.50")
    assert d.loss_of_enjoyment == Decimal("0.00")
    assert d.total_damages == Decimal("4350.50")


def test_negative_general_damages_are_carried_through():
    d = compute_damages(MedicalTotals(), {"pain_and_suffering": "-100"})
    assert d.general_damages_total == Decimal("-100.00")
