from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from casedesk.api.deps import get_case_or_404
from casedesk.db.session import get_db
from casedesk.schemas.document import BatchResultOut, DocumentOut, GenerateRequest, PayloadOut, PayloadRequest
from casedesk.services import documents as document_service

router = APIRouter()


@router.get("/", response_model=list[DocumentOut])
def list_documents(case_id: int, db: Session = Depends(get_db), _=Depends(get_case_or_404)):
    return document_service.list_documents(db, case_id)


@router.post("/generate", response_model=BatchResultOut)
def generate(case_id: int, payload: GenerateRequest, db: Session = Depends(get_db)):
    # Item failures come back as status=error entries; only request-level problems are HTTP errors.
    result = document_service.generate_documents(
        db,
        case_id=case_id,
        template_type=payload.template_type,
        client_ids=payload.client_ids,
        provider_ids=payload.provider_ids,
        selected_party=payload.selected_party,
        requested_by=payload.requested_by,
    )
    return BatchResultOut.model_validate(result)


@router.post("/payload", response_model=PayloadOut)
def preview_payload(case_id: int, payload: PayloadRequest, db: Session = Depends(get_db)):
    data = document_service.preview_payload(
        db,
        case_id=case_id,
        template_type=payload.template_type,
        client_id=payload.client_id,
        provider_id=payload.provider_id,
        selected_party=payload.selected_party,
    )
    return PayloadOut(template_type=payload.template_type, payload=data)
