from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from casedesk.schemas.common import ApiModel


class ClientIn(BaseModel):
    client_number: int = Field(default=1, ge=1)
    first_name: str = Field(min_length=1, max_length=80)
    middle_name: str | None = Field(default=None, max_length=80)
    last_name: str = Field(min_length=1, max_length=80)
    date_of_birth: dt.date | None = None
    ssn: str | None = Field(default=None, max_length=16)
    marital_status: str | None = None
    is_driver: bool = False
    email: str | None = None
    primary_phone: str | None = None
    secondary_phone: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    injury_description: str | None = None
    prior_accidents: str | None = None
    prior_injuries: str | None = None
    work_impact: str | None = None


class ClientOut(ClientIn, ApiModel):
    id: int
    case_id: int
    full_name: str


class DefendantIn(BaseModel):
    defendant_number: int = Field(default=1, ge=1)
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(min_length=1, max_length=80)
    email: str | None = None
    phone_number: str | None = None
    # Advisory only: the case total is reported, never enforced.
    liability_percentage: Decimal = Field(default=Decimal("100"), ge=0, le=100)
    is_policyholder: bool = True
    policyholder_first_name: str | None = None
    policyholder_last_name: str | None = None
    notes: str | None = None


class DefendantOut(DefendantIn, ApiModel):
    id: int
    case_id: int
    full_name: str


class LiabilityOut(BaseModel):
    total_percentage: Decimal
    status: str
    message: str | None


class DefendantList(BaseModel):
    defendants: list[DefendantOut]
    liability: LiabilityOut


class DefendantSaved(BaseModel):
    defendant: DefendantOut
    liability: LiabilityOut
