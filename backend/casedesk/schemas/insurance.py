from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from casedesk.schemas.common import ApiModel


class CarrierIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    kind: str = Field(default="auto", pattern="^(auto|health)$")
    phone: str | None = None
    fax: str | None = None
    email: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class CarrierOut(CarrierIn, ApiModel):
    id: int


class AdjusterIn(BaseModel):
    carrier_id: int | None = None
    first_name: str = Field(min_length=1, max_length=80)
    last_name: str = Field(min_length=1, max_length=80)
    email: str | None = None
    phone: str | None = None
    fax: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class AdjusterOut(AdjusterIn, ApiModel):
    id: int
    full_name: str


class ClaimBase(BaseModel):
    carrier_id: int | None = None
    adjuster_id: int | None = None
    policy_number: str | None = None
    claim_number: str | None = None


class FirstPartyClaimIn(ClaimBase):
    client_id: int
    policy_limits: str | None = None
    pip_available: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    pip_used: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    med_pay_available: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    med_pay_used: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    um_uim_coverage: str | None = None
    property_damage: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)


class FirstPartyClaimOut(FirstPartyClaimIn, ApiModel):
    id: int


class ThirdPartyClaimIn(ClaimBase):
    defendant_id: int
    policy_limits: str | None = None
    liability_disputed: bool = False
    demand_amount: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    offer_amount: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    settlement_amount: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    demand_date: dt.date | None = None
    offer_date: dt.date | None = None
    settlement_date: dt.date | None = None
    notes: str | None = None


class ThirdPartyClaimOut(ThirdPartyClaimIn, ApiModel):
    id: int
    lor_sent: bool
    lor_date: dt.date | None


class HealthClaimIn(ClaimBase):
    client_id: int
    member_id: str | None = None
    group_number: str | None = None
    amount_billed: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    amount_paid: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)


class HealthClaimOut(HealthClaimIn, ApiModel):
    id: int
