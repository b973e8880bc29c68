"""Per-case work log; every entry is its own commit."""

from __future__ import annotations

from sqlalchemy.orm import Session

from casedesk.models.activity_log import ActivityLog


def log_activity(
    db: Session,
    *,
    action: str,
    entity_type: str,
    description: str,
    case_id: int | None = None,
    entity_id: int | None = None,
    user_name: str = "Admin",
    details: dict | None = None,
) -> ActivityLog:
    entry = ActivityLog(
        case_id=case_id,
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        user_name=user_name,
        description=description,
        details=details,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def list_case_activity(db: Session, case_id: int, *, limit: int = 200) -> list[ActivityLog]:
    return (
        db.query(ActivityLog)
        .filter(ActivityLog.case_id == case_id)
        .order_by(ActivityLog.created_at.desc(), ActivityLog.id.desc())
        .limit(limit)
        .all()
    )
