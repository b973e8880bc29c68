from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.models.client import Client
from casedesk.models.defendant import Defendant
from casedesk.services.cases import get_case


def _get_child(db: Session, model: type[Any], *, case_id: int, item_id: int, label: str) -> Any:
    row = db.query(model).filter(model.id == item_id, model.case_id == case_id).first()
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")
    return row


def list_clients(db: Session, case_id: int) -> list[Client]:
    get_case(db, case_id)
    return db.query(Client).filter(Client.case_id == case_id).order_by(Client.client_number, Client.id).all()


def save_client(db: Session, *, case_id: int, payload, client_id: int | None = None) -> Client:
    get_case(db, case_id)
    if client_id is None:
        c = Client(case_id=case_id)
        db.add(c)
    else:
        c = _get_child(db, Client, case_id=case_id, item_id=client_id, label="Client")
    for name, value in payload.model_dump().items():
        setattr(c, name, value)
    db.commit()
    db.refresh(c)
    return c


def delete_client(db: Session, *, case_id: int, client_id: int) -> None:
    c = _get_child(db, Client, case_id=case_id, item_id=client_id, label="Client")
    db.delete(c)
    db.commit()


def list_defendants(db: Session, case_id: int) -> list[Defendant]:
    get_case(db, case_id)
    return (
        db.query(Defendant)
        .filter(Defendant.case_id == case_id)
        .order_by(Defendant.defendant_number, Defendant.id)
        .all()
    )


def save_defendant(db: Session, *, case_id: int, payload, defendant_id: int | None = None) -> Defendant:
    """Liability shares are stored as given; a case total other than 100 is reported, not rejected."""
    get_case(db, case_id)
    if defendant_id is None:
        d = Defendant(case_id=case_id)
        db.add(d)
    else:
        d = _get_child(db, Defendant, case_id=case_id, item_id=defendant_id, label="Defendant")
    for name, value in payload.model_dump().items():
        setattr(d, name, value)
    db.commit()
    db.refresh(d)
    return d


def delete_defendant(db: Session, *, case_id: int, defendant_id: int) -> None:
    d = _get_child(db, Defendant, case_id=case_id, item_id=defendant_id, label="Defendant")
    db.delete(d)
    db.commit()
