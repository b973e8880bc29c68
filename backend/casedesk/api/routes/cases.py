from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from casedesk.api.deps import get_user_name
from casedesk.db.session import get_db
from casedesk.models.enums import CaseStage
from casedesk.schemas.case import CaseCreate, CaseOut, CaseUpdate, CaseUpdateStatus
from casedesk.services import cases as case_service

router = APIRouter()


@router.get("/", response_model=list[CaseOut])
def list_cases(
    include_archived: bool = Query(default=False),
    stage: CaseStage | None = Query(default=None),
    db: Session = Depends(get_db),
):
    items = case_service.list_cases(db, include_archived=include_archived, stage=stage)
    return [case_service.to_case_out(c) for c in items]


@router.post("/", response_model=CaseOut)
def create_case(payload: CaseCreate, db: Session = Depends(get_db)):
    c = case_service.create_case(db, payload, user_name=payload.created_by)
    return case_service.to_case_out(c)


@router.get("/{case_id}", response_model=CaseOut)
def get_case(case_id: int, db: Session = Depends(get_db)):
    return case_service.to_case_out(case_service.get_case(db, case_id))


@router.put("/{case_id}", response_model=CaseOut)
def update_case(case_id: int, payload: CaseUpdate, db: Session = Depends(get_db)):
    c = case_service.update_case(db, case_id=case_id, payload=payload)
    return case_service.to_case_out(c)


@router.patch("/{case_id}/status", response_model=CaseOut)
def update_status(case_id: int, payload: CaseUpdateStatus, db: Session = Depends(get_db)):
    c = case_service.update_case_status(
        db, case_id=case_id, stage=payload.stage, status_value=payload.status, user_name=payload.updated_by
    )
    return case_service.to_case_out(c)


@router.post("/{case_id}/archive", response_model=CaseOut)
def archive_case(case_id: int, db: Session = Depends(get_db), user_name: str = Depends(get_user_name)):
    c = case_service.set_archived(db, case_id=case_id, archived=True, user_name=user_name)
    return case_service.to_case_out(c)


@router.post("/{case_id}/unarchive", response_model=CaseOut)
def unarchive_case(case_id: int, db: Session = Depends(get_db), user_name: str = Depends(get_user_name)):
    c = case_service.set_archived(db, case_id=case_id, archived=False, user_name=user_name)
    return case_service.to_case_out(c)
