"""Case work log API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from casedesk.api.deps import get_case_or_404
from casedesk.db.session import get_db
from casedesk.schemas.document import ActivityOut
from casedesk.services.activity_log import list_case_activity

router = APIRouter()


@router.get("/", response_model=list[ActivityOut])
def get_activity(
    case_id: int,
    limit: int = Query(default=50, ge=1, le=200),
    db: Session = Depends(get_db),
    _=Depends(get_case_or_404),
):
    return list_case_activity(db, case_id, limit=limit)
