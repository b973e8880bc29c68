from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from casedesk.services.formatting import format_percentage
from casedesk.services.money import q_usd, to_decimal

FULL_LIABILITY = Decimal("100")


@dataclass(frozen=True)
class LiabilitySummary:
    total_percentage: Decimal
    status: str  # balanced | under | exceeds
    message: str | None


def liability_summary(defendants: Iterable[Any]) -> LiabilitySummary:
    """
    Advisory check that a case's defendant shares add up to 100%.
    Never blocks a save; callers only display the message.
    """
    total = q_usd(sum((to_decimal(getattr(d, "liability_percentage", None)) for d in defendants), Decimal("0")))
    shown = format_percentage(total)
    if total > FULL_LIABILITY:
        return LiabilitySummary(total, "exceeds", f"Total liability is {shown} (exceeds 100%)")
    if total < FULL_LIABILITY:
        return LiabilitySummary(total, "under", f"Total liability is {shown} (under 100%)")
    return LiabilitySummary(total, "balanced", None)
