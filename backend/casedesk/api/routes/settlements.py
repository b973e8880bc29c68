from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.schemas.settlement import SettlementIn, SettlementOut, SettlementSplitOut
from casedesk.services import settlement as settlement_service
from casedesk.services.cases import get_case

router = APIRouter()
case_router = APIRouter()


@case_router.get("/", response_model=SettlementOut | None)
def get_settlement(case_id: int, db: Session = Depends(get_db)):
    get_case(db, case_id)
    return settlement_service.get_current_settlement(db, case_id)


@case_router.put("/", response_model=SettlementOut)
def save_settlement(case_id: int, payload: SettlementIn, db: Session = Depends(get_db)):
    return settlement_service.save_settlement(db, case_id=case_id, payload=payload)


@router.post("/preview", response_model=SettlementSplitOut)
def preview_split(payload: SettlementIn):
    split = settlement_service.split_settlement(
        payload.gross_settlement, payload.attorney_fee_percentage, payload.case_expenses, payload.medical_liens
    )
    return asdict(split)
