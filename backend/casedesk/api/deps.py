from __future__ import annotations

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.models.case import Case
from casedesk.services.cases import get_case


def get_case_or_404(case_id: int, db: Session = Depends(get_db)) -> Case:
    return get_case(db, case_id)


def get_user_name(x_user_name: str | None = Header(default=None)) -> str:
    """Name recorded on audit entries. There is no login; callers identify themselves."""
    return (x_user_name or "").strip() or "Admin"
