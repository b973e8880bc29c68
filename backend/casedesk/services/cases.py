from __future__ import annotations

import datetime as dt

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.core.config import settings
from casedesk.models.case import Case
from casedesk.models.enums import CASE_STATUSES, CaseStage
from casedesk.services.activity_log import log_activity
from casedesk.services.formatting import case_name
from casedesk.services.statute import statute_days_left, statute_deadline

CASE_FIELDS = (
    "date_of_loss",
    "time_of_wreck",
    "wreck_type",
    "wreck_street",
    "wreck_city",
    "wreck_county",
    "wreck_state",
    "police_report_number",
    "vehicle_description",
    "damage_level",
    "wreck_description",
    "wreck_notes",
)


def get_case(db: Session, case_id: int) -> Case:
    c = db.query(Case).filter(Case.id == case_id).first()
    if not c:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Case not found")
    return c


def list_cases(db: Session, *, include_archived: bool = False, stage: CaseStage | None = None) -> list[Case]:
    q = db.query(Case)
    if not include_archived:
        q = q.filter(Case.is_archived.is_(False))
    if stage is not None:
        q = q.filter(Case.stage == stage)
    return q.order_by(Case.created_at.desc(), Case.id.desc()).all()


def validate_stage_status(stage: CaseStage, status_value: str) -> None:
    if status_value not in CASE_STATUSES[stage]:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Status '{status_value}' is not valid for stage {stage.value}",
        )


def create_case(db: Session, payload, *, user_name: str = "Admin") -> Case:
    stage = payload.stage or CaseStage.INTAKE
    status_value = payload.status or CASE_STATUSES[stage][0]
    validate_stage_status(stage, status_value)

    c = Case(stage=stage, status=status_value, is_archived=False)
    for name in CASE_FIELDS:
        setattr(c, name, getattr(payload, name))
    db.add(c)
    db.commit()
    db.refresh(c)

    log_activity(
        db,
        case_id=c.id,
        action="case_create",
        entity_type="case",
        entity_id=c.id,
        user_name=user_name,
        description=f"Case #{c.id} opened",
    )
    return c


def update_case(db: Session, *, case_id: int, payload) -> Case:
    c = get_case(db, case_id)
    for name, value in payload.model_dump(exclude_unset=True).items():
        setattr(c, name, value)
    db.commit()
    db.refresh(c)
    return c


def update_case_status(
    db: Session, *, case_id: int, stage: CaseStage, status_value: str, user_name: str = "Admin"
) -> Case:
    c = get_case(db, case_id)
    validate_stage_status(stage, status_value)
    if (c.stage, c.status) == (stage, status_value):
        return c

    old = f"{c.stage.value} - {c.status}"
    c.stage = stage
    c.status = status_value
    db.commit()
    db.refresh(c)
    log_activity(
        db,
        case_id=c.id,
        action="status_change",
        entity_type="case",
        entity_id=c.id,
        user_name=user_name,
        description=f"Stage/status changed from {old} to {stage.value} - {status_value}",
    )
    return c


def set_archived(db: Session, *, case_id: int, archived: bool, user_name: str = "Admin") -> Case:
    c = get_case(db, case_id)
    if c.is_archived == archived:
        return c
    c.is_archived = archived
    db.commit()
    db.refresh(c)
    log_activity(
        db,
        case_id=c.id,
        action="case_archive" if archived else "case_unarchive",
        entity_type="case",
        entity_id=c.id,
        user_name=user_name,
        description=f"Case #{c.id} {'archived' if archived else 'restored'}",
    )
    return c


def to_case_out(case: Case, *, today: dt.date | None = None) -> dict:
    today = today or dt.date.today()
    deadline = statute_deadline(case.date_of_loss, years=settings.statute_years)
    opened = case.created_at.date() if case.created_at else today
    out = {name: getattr(case, name) for name in CASE_FIELDS}
    out.update(
        id=case.id,
        case_name=case_name(list(case.clients)),
        stage=case.stage,
        status=case.status,
        is_archived=case.is_archived,
        statute_deadline=deadline,
        statute_days_left=statute_days_left(deadline, today=today),
        days_open=(today - opened).days,
        created_at=case.created_at,
    )
    return out
