from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from casedesk.schemas.common import ApiModel


class GeneralDamagesIn(BaseModel):
    emotional_distress: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    duties_under_duress: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    pain_and_suffering: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    loss_of_enjoyment: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    loss_of_consortium: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)


class GeneralDamagesOut(GeneralDamagesIn, ApiModel):
    case_id: int


class MileageIn(BaseModel):
    trip_date: dt.date | None = None
    description: str | None = Field(default=None, max_length=200)
    miles: Decimal = Field(ge=0, max_digits=10, decimal_places=2)
    rate_per_mile: Decimal | None = Field(default=None, ge=0, max_digits=8, decimal_places=4)  # settings.mileage_rate when omitted


class MileageOut(ApiModel):
    id: int
    case_id: int
    trip_date: dt.date | None
    description: str | None
    miles: Decimal
    rate_per_mile: Decimal
    total: Decimal | None


class MedicalTotalsOut(BaseModel):
    total_billed: Decimal
    total_insurance_paid: Decimal
    total_insurance_adjusted: Decimal
    total_medpay_paid: Decimal
    total_patient_paid: Decimal
    total_reduction: Decimal
    total_expense: Decimal
    total_balance_due: Decimal
    mileage_total: Decimal


class DamagesOut(BaseModel):
    emotional_distress: Decimal
    duties_under_duress: Decimal
    pain_and_suffering: Decimal
    loss_of_enjoyment: Decimal
    loss_of_consortium: Decimal
    special_damages_total: Decimal
    general_damages_total: Decimal
    total_damages: Decimal


class FinancialsOut(BaseModel):
    case_id: int
    totals: MedicalTotalsOut
    damages: DamagesOut
