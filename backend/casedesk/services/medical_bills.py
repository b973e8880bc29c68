from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.orm import Session, joinedload

from casedesk.models.client import Client
from casedesk.models.medical import MedicalBill, MedicalProvider
from casedesk.services.cases import get_case
from casedesk.services.financials import calculate_balance_due


def list_providers(db: Session) -> list[MedicalProvider]:
    return db.query(MedicalProvider).order_by(MedicalProvider.name.asc()).all()


def create_provider(db: Session, payload) -> MedicalProvider:
    p = MedicalProvider(**payload.model_dump())
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def list_bills(db: Session, case_id: int) -> list[MedicalBill]:
    get_case(db, case_id)
    return (
        db.query(MedicalBill)
        .options(joinedload(MedicalBill.medical_provider))
        .join(Client, Client.id == MedicalBill.client_id)
        .filter(Client.case_id == case_id)
        .order_by(MedicalBill.date_of_service.asc().nulls_last(), MedicalBill.id.asc())
        .all()
    )


def _check_refs(db: Session, *, case_id: int, payload) -> None:
    client = db.query(Client).filter(Client.id == payload.client_id, Client.case_id == case_id).first()
    if not client:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Client is not on this case")
    if payload.medical_provider_id is not None and not db.get(MedicalProvider, payload.medical_provider_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown medical provider")


def _get_bill(db: Session, *, case_id: int, bill_id: int) -> MedicalBill:
    bill = (
        db.query(MedicalBill)
        .join(Client, Client.id == MedicalBill.client_id)
        .filter(MedicalBill.id == bill_id, Client.case_id == case_id)
        .first()
    )
    if not bill:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Medical bill not found")
    return bill


def save_bill(db: Session, *, case_id: int, payload, bill_id: int | None = None) -> MedicalBill:
    get_case(db, case_id)
    _check_refs(db, case_id=case_id, payload=payload)
    if bill_id is None:
        bill = MedicalBill()
        db.add(bill)
    else:
        bill = _get_bill(db, case_id=case_id, bill_id=bill_id)
    for name, value in payload.model_dump().items():
        setattr(bill, name, value)
    if payload.balance_due is None:
        bill.balance_due = calculate_balance_due(bill)
    db.commit()
    db.refresh(bill)
    return bill


def delete_bill(db: Session, *, case_id: int, bill_id: int) -> None:
    bill = _get_bill(db, case_id=case_id, bill_id=bill_id)
    db.delete(bill)
    db.commit()
