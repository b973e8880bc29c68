"""Stored inputs of the damages calculation: general damages and mileage."""

from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.core.config import settings
from casedesk.models.damages import GeneralDamages, MileageLog
from casedesk.services.cases import get_case
from casedesk.services.money import q_usd, to_decimal


def get_general_damages(db: Session, case_id: int) -> GeneralDamages | None:
    get_case(db, case_id)
    return db.query(GeneralDamages).filter(GeneralDamages.case_id == case_id).first()


def save_general_damages(db: Session, *, case_id: int, payload) -> GeneralDamages:
    gd = get_general_damages(db, case_id)
    if gd is None:
        gd = GeneralDamages(case_id=case_id)
        db.add(gd)
    for name, value in payload.model_dump().items():
        setattr(gd, name, value)
    db.commit()
    db.refresh(gd)
    return gd


def list_mileage(db: Session, case_id: int) -> list[MileageLog]:
    get_case(db, case_id)
    return (
        db.query(MileageLog)
        .filter(MileageLog.case_id == case_id)
        .order_by(MileageLog.trip_date.asc().nulls_last(), MileageLog.id.asc())
        .all()
    )


def add_mileage(db: Session, *, case_id: int, payload) -> MileageLog:
    get_case(db, case_id)
    rate = settings.mileage_rate if payload.rate_per_mile is None else payload.rate_per_mile
    entry = MileageLog(
        case_id=case_id,
        trip_date=payload.trip_date,
        description=payload.description,
        miles=payload.miles,
        rate_per_mile=rate,
        total=q_usd(to_decimal(payload.miles) * to_decimal(rate)),
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def delete_mileage(db: Session, *, case_id: int, entry_id: int) -> None:
    entry = db.query(MileageLog).filter(MileageLog.id == entry_id, MileageLog.case_id == case_id).first()
    if not entry:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Mileage entry not found")
    db.delete(entry)
    db.commit()
