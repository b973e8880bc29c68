from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.core.config import settings
from casedesk.models.case import Case
from casedesk.models.enums import SettlementStatus
from casedesk.models.settlement import Settlement
from casedesk.services.money import ZERO, q_usd, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SettlementSplit:
    gross_settlement: Decimal
    attorney_fee_percentage: Decimal
    case_expenses: Decimal
    medical_liens: Decimal
    attorney_fee: Decimal
    client_net: Decimal


def split_settlement(
    gross_settlement: Any,
    attorney_fee_percentage: Any = None,
    case_expenses: Any = None,
    medical_liens: Any = None,
) -> SettlementSplit:
    """
    attorney_fee = gross * pct / 100
    client_net   = max(0, gross - attorney_fee - expenses - liens)

    Client net is floored at zero even when fees and liens exceed the gross.
    """
    gross = q_usd(to_decimal(gross_settlement))
    if attorney_fee_percentage is None:
        attorney_fee_percentage = settings.default_attorney_fee_percentage
    pct = to_decimal(attorney_fee_percentage)
    expenses = q_usd(to_decimal(case_expenses))
    liens = q_usd(to_decimal(medical_liens))

    fee = q_usd(gross * pct / Decimal("100"))
    net = q_usd(gross - fee - expenses - liens)
    if net < 0:
        logger.info("client net floored at zero (gross=%s fee=%s expenses=%s liens=%s)", gross, fee, expenses, liens)
        net = ZERO
    return SettlementSplit(
        gross_settlement=gross,
        attorney_fee_percentage=pct,
        case_expenses=expenses,
        medical_liens=liens,
        attorney_fee=fee,
        client_net=net,
    )


def apply_split(s: Settlement) -> Settlement:
    """Recompute both derived figures from the inputs currently on the row."""
    split = split_settlement(s.gross_settlement, s.attorney_fee_percentage, s.case_expenses, s.medical_liens)
    s.gross_settlement = split.gross_settlement
    s.attorney_fee_percentage = split.attorney_fee_percentage
    s.case_expenses = split.case_expenses
    s.medical_liens = split.medical_liens
    s.attorney_fee = split.attorney_fee
    s.client_net = split.client_net
    return s


def get_current_settlement(db: Session, case_id: int) -> Settlement | None:
    # Latest by settlement date; undated rows rank after dated ones, newest id first.
    return (
        db.query(Settlement)
        .filter(Settlement.case_id == case_id)
        .order_by(Settlement.settlement_date.desc().nulls_last(), Settlement.id.desc())
        .first()
    )


def save_settlement(db: Session, *, case_id: int, payload) -> Settlement:
    """
    Full overwrite of the case's current settlement (created on first save).
    Last write wins; there is no version check.
    """
    case = db.query(Case).filter(Case.id == case_id).first()
    if not case:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Case not found")

    s = get_current_settlement(db, case_id)
    if s is None:
        s = Settlement(case_id=case_id)
        db.add(s)

    pct = payload.attorney_fee_percentage
    s.gross_settlement = payload.gross_settlement
    s.attorney_fee_percentage = settings.default_attorney_fee_percentage if pct is None else pct
    s.case_expenses = payload.case_expenses
    s.medical_liens = payload.medical_liens
    s.settlement_date = payload.settlement_date
    s.status = payload.status or SettlementStatus.PENDING
    apply_split(s)

    db.commit()
    db.refresh(s)
    return s
