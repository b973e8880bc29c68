from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from casedesk.models.enums import RequestMethod
from casedesk.schemas.common import ApiModel


class MedicalProviderIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    type: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    phone: str | None = None
    fax: str | None = None
    email: str | None = None
    request_method: RequestMethod = RequestMethod.FAX
    notes: str | None = None


class MedicalProviderOut(MedicalProviderIn, ApiModel):
    id: int


class MedicalBillIn(BaseModel):
    client_id: int
    medical_provider_id: int | None = None
    hipaa_sent: bool = False
    bill_received: bool = False
    records_received: bool = False

    amount_billed: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    insurance_paid: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    insurance_adjusted: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    medpay_paid: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    patient_paid: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    reduction_amount: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    pi_expense: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)
    balance_due: Decimal | None = Field(default=None, ge=0, max_digits=14, decimal_places=2)  # computed when omitted

    service_type: str | None = None
    date_of_service: dt.date | None = None
    bill_number: str | None = None
    notes: str | None = None


class MedicalBillOut(MedicalBillIn, ApiModel):
    id: int
    provider_name: str | None = None
