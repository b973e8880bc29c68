from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.schemas.medical import MedicalBillIn, MedicalBillOut, MedicalProviderIn, MedicalProviderOut
from casedesk.services import medical_bills as medical_service

router = APIRouter()
case_router = APIRouter()


def _to_out(b) -> MedicalBillOut:
    out = MedicalBillOut.model_validate(b)
    out.provider_name = b.medical_provider.name if b.medical_provider else None
    return out


@router.get("/", response_model=list[MedicalProviderOut])
def list_providers(db: Session = Depends(get_db)):
    return medical_service.list_providers(db)


@router.post("/", response_model=MedicalProviderOut)
def create_provider(payload: MedicalProviderIn, db: Session = Depends(get_db)):
    return medical_service.create_provider(db, payload)


@case_router.get("/", response_model=list[MedicalBillOut])
def list_bills(case_id: int, db: Session = Depends(get_db)):
    return [_to_out(b) for b in medical_service.list_bills(db, case_id)]


@case_router.post("/", response_model=MedicalBillOut)
def add_bill(case_id: int, payload: MedicalBillIn, db: Session = Depends(get_db)):
    return _to_out(medical_service.save_bill(db, case_id=case_id, payload=payload))


@case_router.put("/{bill_id}", response_model=MedicalBillOut)
def update_bill(case_id: int, bill_id: int, payload: MedicalBillIn, db: Session = Depends(get_db)):
    return _to_out(medical_service.save_bill(db, case_id=case_id, payload=payload, bill_id=bill_id))


@case_router.delete("/{bill_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_bill(case_id: int, bill_id: int, db: Session = Depends(get_db)):
    medical_service.delete_bill(db, case_id=case_id, bill_id=bill_id)
