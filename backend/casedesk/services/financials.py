from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from casedesk.services.money import ZERO, q_usd, sum_usd, to_decimal

# (attribute on MedicalBill, attribute on MedicalTotals)
BILL_FIELDS: tuple[tuple[str, str], ...] = (
    ("amount_billed", "total_billed"),
    ("insurance_paid", "total_insurance_paid"),
    ("insurance_adjusted", "total_insurance_adjusted"),
    ("medpay_paid", "total_medpay_paid"),
    ("patient_paid", "total_patient_paid"),
    ("reduction_amount", "total_reduction"),
    ("pi_expense", "total_expense"),
    ("balance_due", "total_balance_due"),
)


@dataclass(frozen=True)
class MedicalTotals:
    total_billed: Decimal = ZERO
    total_insurance_paid: Decimal = ZERO
    total_insurance_adjusted: Decimal = ZERO
    total_medpay_paid: Decimal = ZERO
    total_patient_paid: Decimal = ZERO
    total_reduction: Decimal = ZERO
    total_expense: Decimal = ZERO
    total_balance_due: Decimal = ZERO
    mileage_total: Decimal = ZERO


def record_value(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def calculate_balance_due(bill: Any) -> Decimal:
    """Billed minus every payment/adjustment on the bill, never below zero."""
    billed = to_decimal(record_value(bill, "amount_billed"))
    credits = sum_usd(record_value(bill, name) for name, _ in BILL_FIELDS[1:7])
    return max(ZERO, q_usd(billed - credits))


def mileage_total(entries: Iterable[Any]) -> Decimal:
    return sum_usd(record_value(e, "total") for e in entries)


def aggregate_financials(bills: Iterable[Any], mileage_entries: Iterable[Any] = ()) -> MedicalTotals:
    """
    Per-case running sums over medical bills plus the mileage roll-up.
    Missing figures count as zero; the result does not depend on input order.
    """
    bills = list(bills)
    totals = {total_name: sum_usd(record_value(b, bill_name) for b in bills) for bill_name, total_name in BILL_FIELDS}
    return MedicalTotals(**totals, mileage_total=mileage_total(mileage_entries))
