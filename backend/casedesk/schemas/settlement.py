from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from casedesk.models.enums import SettlementStatus
from casedesk.schemas.common import ApiModel


class SettlementIn(BaseModel):
    gross_settlement: Decimal = Field(default=Decimal("0"), ge=0, max_digits=14, decimal_places=2)
    attorney_fee_percentage: Decimal | None = Field(default=None, ge=0, le=100, decimal_places=2)  # settings default when omitted
    case_expenses: Decimal = Field(default=Decimal("0"), ge=0, max_digits=14, decimal_places=2)
    medical_liens: Decimal = Field(default=Decimal("0"), ge=0, max_digits=14, decimal_places=2)
    settlement_date: dt.date | None = None
    status: SettlementStatus | None = None


class SettlementSplitOut(BaseModel):
    gross_settlement: Decimal
    attorney_fee_percentage: Decimal
    case_expenses: Decimal
    medical_liens: Decimal
    attorney_fee: Decimal
    client_net: Decimal


class SettlementOut(SettlementSplitOut, ApiModel):
    id: int
    case_id: int
    settlement_date: dt.date | None
    status: SettlementStatus
    updated_at: dt.datetime | None = None
