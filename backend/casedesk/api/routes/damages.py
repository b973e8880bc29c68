from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.schemas.damages import FinancialsOut, GeneralDamagesIn, GeneralDamagesOut, MileageIn, MileageOut
from casedesk.services import damage_inputs as damage_service
from casedesk.services.damages import compute_damages
from casedesk.services.financials import aggregate_financials
from casedesk.services.medical_bills import list_bills

router = APIRouter()


@router.get("/general-damages", response_model=GeneralDamagesOut | None)
def get_general_damages(case_id: int, db: Session = Depends(get_db)):
    return damage_service.get_general_damages(db, case_id)


@router.put("/general-damages", response_model=GeneralDamagesOut)
def save_general_damages(case_id: int, payload: GeneralDamagesIn, db: Session = Depends(get_db)):
    return damage_service.save_general_damages(db, case_id=case_id, payload=payload)


@router.get("/mileage", response_model=list[MileageOut])
def list_mileage(case_id: int, db: Session = Depends(get_db)):
    return damage_service.list_mileage(db, case_id)


@router.post("/mileage", response_model=MileageOut)
def add_mileage(case_id: int, payload: MileageIn, db: Session = Depends(get_db)):
    return damage_service.add_mileage(db, case_id=case_id, payload=payload)


@router.delete("/mileage/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mileage(case_id: int, entry_id: int, db: Session = Depends(get_db)):
    damage_service.delete_mileage(db, case_id=case_id, entry_id=entry_id)


@router.get("/financials", response_model=FinancialsOut)
def get_financials(case_id: int, db: Session = Depends(get_db)):
    totals = aggregate_financials(list_bills(db, case_id), damage_service.list_mileage(db, case_id))
    damages = compute_damages(totals, damage_service.get_general_damages(db, case_id))
    return {"case_id": case_id, "totals": asdict(totals), "damages": asdict(damages)}
