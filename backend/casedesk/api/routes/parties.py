from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.schemas.party import ClientIn, ClientOut, DefendantIn, DefendantList, DefendantOut, DefendantSaved, LiabilityOut
from casedesk.services import parties as party_service
from casedesk.services.liability import liability_summary

router = APIRouter()


def _liability(db: Session, case_id: int) -> LiabilityOut:
    s = liability_summary(party_service.list_defendants(db, case_id))
    return LiabilityOut(total_percentage=s.total_percentage, status=s.status, message=s.message)


@router.get("/clients", response_model=list[ClientOut])
def list_clients(case_id: int, db: Session = Depends(get_db)):
    return party_service.list_clients(db, case_id)


@router.post("/clients", response_model=ClientOut)
def add_client(case_id: int, payload: ClientIn, db: Session = Depends(get_db)):
    return party_service.save_client(db, case_id=case_id, payload=payload)


@router.put("/clients/{client_id}", response_model=ClientOut)
def update_client(case_id: int, client_id: int, payload: ClientIn, db: Session = Depends(get_db)):
    return party_service.save_client(db, case_id=case_id, payload=payload, client_id=client_id)


@router.delete("/clients/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(case_id: int, client_id: int, db: Session = Depends(get_db)):
    party_service.delete_client(db, case_id=case_id, client_id=client_id)


@router.get("/defendants", response_model=DefendantList)
def list_defendants(case_id: int, db: Session = Depends(get_db)):
    items = party_service.list_defendants(db, case_id)
    return DefendantList(
        defendants=[DefendantOut.model_validate(d) for d in items],
        liability=_liability(db, case_id),
    )


@router.post("/defendants", response_model=DefendantSaved)
def add_defendant(case_id: int, payload: DefendantIn, db: Session = Depends(get_db)):
    d = party_service.save_defendant(db, case_id=case_id, payload=payload)
    return DefendantSaved(defendant=DefendantOut.model_validate(d), liability=_liability(db, case_id))


@router.put("/defendants/{defendant_id}", response_model=DefendantSaved)
def update_defendant(case_id: int, defendant_id: int, payload: DefendantIn, db: Session = Depends(get_db)):
    d = party_service.save_defendant(db, case_id=case_id, payload=payload, defendant_id=defendant_id)
    return DefendantSaved(defendant=DefendantOut.model_validate(d), liability=_liability(db, case_id))


@router.delete("/defendants/{defendant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_defendant(case_id: int, defendant_id: int, db: Session = Depends(get_db)):
    party_service.delete_defendant(db, case_id=case_id, defendant_id=defendant_id)
