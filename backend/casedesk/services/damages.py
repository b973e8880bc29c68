from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from casedesk.services.financials import MedicalTotals, record_value
from casedesk.services.money import ZERO, q_usd, sum_usd, to_decimal

# Attribute name -> label used in letters.
GENERAL_DAMAGE_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("emotional_distress", "Emotional Distress"),
    ("duties_under_duress", "Duties Under Duress"),
    ("pain_and_suffering", "Pain and Suffering"),
    ("loss_of_enjoyment", "Loss of Enjoyment of Life"),
    ("loss_of_consortium", "Loss of Consortium"),
)


@dataclass(frozen=True)
class Damages:
    emotional_distress: Decimal = ZERO
    duties_under_duress: Decimal = ZERO
    pain_and_suffering: Decimal = ZERO
    loss_of_enjoyment: Decimal = ZERO
    loss_of_consortium: Decimal = ZERO
    special_damages_total: Decimal = ZERO
    general_damages_total: Decimal = ZERO
    total_damages: Decimal = ZERO


def compute_damages(totals: MedicalTotals, general_damages: Any | None = None) -> Damages:
    """
    special = billed + insurance adjusted + mileage
    general = the five named categories (absent record -> all zero)
    total   = special + general

    Negative inputs are carried through as-is.
    """
    categories = {name: q_usd(to_decimal(record_value(general_damages, name))) for name, _ in GENERAL_DAMAGE_CATEGORIES}
    special = sum_usd((totals.total_billed, totals.total_insurance_adjusted, totals.mileage_total))
    general = sum_usd(categories.values())
    return Damages(
        **categories,
        special_damages_total=special,
        general_damages_total=general,
        total_damages=q_usd(special + general),
    )
