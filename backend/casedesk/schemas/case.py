from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from casedesk.models.enums import CaseStage
from casedesk.schemas.common import ApiModel


class CaseFields(BaseModel):
    date_of_loss: dt.date | None = None
    time_of_wreck: str | None = Field(default=None, max_length=32)
    wreck_type: str | None = Field(default=None, max_length=64)
    wreck_street: str | None = Field(default=None, max_length=200)
    wreck_city: str | None = Field(default=None, max_length=120)
    wreck_county: str | None = Field(default=None, max_length=120)
    wreck_state: str | None = Field(default=None, max_length=32)
    police_report_number: str | None = Field(default=None, max_length=64)
    vehicle_description: str | None = Field(default=None, max_length=200)
    damage_level: str | None = Field(default=None, max_length=64)
    wreck_description: str | None = None
    wreck_notes: str | None = None


class CaseCreate(CaseFields):
    stage: CaseStage | None = None  # default Intake
    status: str | None = None  # default: first status of the stage
    created_by: str = "Admin"


class CaseUpdate(CaseFields):
    pass


class CaseUpdateStatus(BaseModel):
    stage: CaseStage
    status: str = Field(min_length=1, max_length=64)
    updated_by: str = "Admin"


class CaseOut(CaseFields, ApiModel):
    id: int
    case_name: str
    stage: CaseStage
    status: str
    is_archived: bool
    statute_deadline: dt.date | None  # date_of_loss + statute_years
    statute_days_left: int | None
    days_open: int
    created_at: dt.datetime | None
