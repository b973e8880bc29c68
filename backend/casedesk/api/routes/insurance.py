from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from casedesk.db.session import get_db
from casedesk.schemas.insurance import (
    AdjusterIn,
    AdjusterOut,
    CarrierIn,
    CarrierOut,
    FirstPartyClaimIn,
    FirstPartyClaimOut,
    HealthClaimIn,
    HealthClaimOut,
    ThirdPartyClaimIn,
    ThirdPartyClaimOut,
)
from casedesk.services import claims as claim_service

router = APIRouter()


@router.get("/insurance-carriers", response_model=list[CarrierOut])
def list_carriers(kind: str | None = Query(default=None), db: Session = Depends(get_db)):
    return claim_service.list_carriers(db, kind)


@router.post("/insurance-carriers", response_model=CarrierOut)
def create_carrier(payload: CarrierIn, db: Session = Depends(get_db)):
    return claim_service.create_carrier(db, payload)


@router.get("/adjusters", response_model=list[AdjusterOut])
def list_adjusters(carrier_id: int | None = Query(default=None), db: Session = Depends(get_db)):
    return claim_service.list_adjusters(db, carrier_id)


@router.post("/adjusters", response_model=AdjusterOut)
def create_adjuster(payload: AdjusterIn, db: Session = Depends(get_db)):
    return claim_service.create_adjuster(db, payload)


@router.get("/cases/{case_id}/claims/first-party", response_model=list[FirstPartyClaimOut])
def list_first_party(case_id: int, db: Session = Depends(get_db)):
    return claim_service.list_first_party(db, case_id)


@router.post("/cases/{case_id}/claims/first-party", response_model=FirstPartyClaimOut)
def create_first_party(case_id: int, payload: FirstPartyClaimIn, db: Session = Depends(get_db)):
    return claim_service.create_first_party(db, case_id=case_id, payload=payload)


@router.get("/cases/{case_id}/claims/third-party", response_model=list[ThirdPartyClaimOut])
def list_third_party(case_id: int, db: Session = Depends(get_db)):
    return claim_service.list_third_party(db, case_id)


@router.post("/cases/{case_id}/claims/third-party", response_model=ThirdPartyClaimOut)
def create_third_party(case_id: int, payload: ThirdPartyClaimIn, db: Session = Depends(get_db)):
    return claim_service.create_third_party(db, case_id=case_id, payload=payload)


@router.get("/cases/{case_id}/claims/health", response_model=list[HealthClaimOut])
def list_health(case_id: int, db: Session = Depends(get_db)):
    return claim_service.list_health(db, case_id)


@router.post("/cases/{case_id}/claims/health", response_model=HealthClaimOut)
def create_health(case_id: int, payload: HealthClaimIn, db: Session = Depends(get_db)):
    return claim_service.create_health(db, case_id=case_id, payload=payload)
