from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from casedesk.models.enums import DocumentCategory, GenerationMode, GenerationStatus
from casedesk.schemas.common import ApiModel


class GenerateRequest(BaseModel):
    template_type: str = Field(min_length=1)
    client_ids: list[int] | None = None  # template default selection when omitted
    provider_ids: list[int] | None = None
    selected_party: str | None = Field(default=None, pattern="^(first|third)$")
    requested_by: str = "Admin"


class PayloadRequest(BaseModel):
    template_type: str = Field(min_length=1)
    client_id: int | None = None
    provider_id: int | None = None
    selected_party: str | None = Field(default=None, pattern="^(first|third)$")


class GenerationItemOut(ApiModel):
    index: int
    document_name: str
    client_id: int | None
    provider_id: int | None
    status: GenerationStatus
    error: str | None
    document_id: int | None


class BatchResultOut(ApiModel):
    case_id: int
    template_type: str
    generation_mode: GenerationMode
    success_count: int
    error_count: int
    items: list[GenerationItemOut]


class PayloadOut(BaseModel):
    template_type: str
    payload: dict[str, Any]


class DocumentOut(ApiModel):
    id: int
    case_id: int
    file_name: str
    file_type: str
    file_size: int
    storage_path: str
    file_url: str | None
    category: DocumentCategory
    uploaded_by: str
    notes: str | None
    created_at: dt.datetime | None


class ActivityOut(ApiModel):
    id: int
    created_at: dt.datetime | None
    case_id: int | None
    user_name: str
    action: str
    entity_type: str
    entity_id: int | None
    description: str
    details: dict | None
