from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.models.client import Client
from casedesk.models.defendant import Defendant
from casedesk.models.insurance import Adjuster, FirstPartyClaim, HealthClaim, InsuranceCarrier, ThirdPartyClaim
from casedesk.services.cases import get_case


def list_carriers(db: Session, kind: str | None = None) -> list[InsuranceCarrier]:
    q = db.query(InsuranceCarrier)
    if kind:
        q = q.filter(InsuranceCarrier.kind == kind)
    return q.order_by(InsuranceCarrier.name.asc()).all()


def create_carrier(db: Session, payload) -> InsuranceCarrier:
    c = InsuranceCarrier(**payload.model_dump())
    db.add(c)
    db.commit()
    db.refresh(c)
    return c


def list_adjusters(db: Session, carrier_id: int | None = None) -> list[Adjuster]:
    q = db.query(Adjuster)
    if carrier_id is not None:
        q = q.filter(Adjuster.carrier_id == carrier_id)
    return q.order_by(Adjuster.last_name.asc(), Adjuster.first_name.asc()).all()


def create_adjuster(db: Session, payload) -> Adjuster:
    a = Adjuster(**payload.model_dump())
    db.add(a)
    db.commit()
    db.refresh(a)
    return a


def _check_contacts(db: Session, payload) -> None:
    if payload.carrier_id is not None and not db.get(InsuranceCarrier, payload.carrier_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown insurance carrier")
    if payload.adjuster_id is not None and not db.get(Adjuster, payload.adjuster_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown adjuster")


def _case_client(db: Session, case_id: int, client_id: int) -> Client:
    c = db.query(Client).filter(Client.id == client_id, Client.case_id == case_id).first()
    if not c:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Client is not on this case")
    return c


def _case_defendant(db: Session, case_id: int, defendant_id: int) -> Defendant:
    d = db.query(Defendant).filter(Defendant.id == defendant_id, Defendant.case_id == case_id).first()
    if not d:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Defendant is not on this case")
    return d


def list_first_party(db: Session, case_id: int) -> list[FirstPartyClaim]:
    get_case(db, case_id)
    return (
        db.query(FirstPartyClaim)
        .join(Client, Client.id == FirstPartyClaim.client_id)
        .filter(Client.case_id == case_id)
        .order_by(FirstPartyClaim.id.asc())
        .all()
    )


def create_first_party(db: Session, *, case_id: int, payload) -> FirstPartyClaim:
    get_case(db, case_id)
    _case_client(db, case_id, payload.client_id)
    _check_contacts(db, payload)
    claim = FirstPartyClaim(**payload.model_dump())
    db.add(claim)
    db.commit()
    db.refresh(claim)
    return claim


def list_third_party(db: Session, case_id: int) -> list[ThirdPartyClaim]:
    get_case(db, case_id)
    return (
        db.query(ThirdPartyClaim)
        .join(Defendant, Defendant.id == ThirdPartyClaim.defendant_id)
        .filter(Defendant.case_id == case_id)
        .order_by(ThirdPartyClaim.id.asc())
        .all()
    )


def create_third_party(db: Session, *, case_id: int, payload) -> ThirdPartyClaim:
    get_case(db, case_id)
    _case_defendant(db, case_id, payload.defendant_id)
    _check_contacts(db, payload)
    claim = ThirdPartyClaim(**payload.model_dump(), lor_sent=False)
    db.add(claim)
    db.commit()
    db.refresh(claim)
    return claim


def list_health(db: Session, case_id: int) -> list[HealthClaim]:
    get_case(db, case_id)
    return (
        db.query(HealthClaim)
        .join(Client, Client.id == HealthClaim.client_id)
        .filter(Client.case_id == case_id)
        .order_by(HealthClaim.id.asc())
        .all()
    )


def create_health(db: Session, *, case_id: int, payload) -> HealthClaim:
    get_case(db, case_id)
    _case_client(db, case_id, payload.client_id)
    _check_contacts(db, payload)
    claim = HealthClaim(**payload.model_dump())
    db.add(claim)
    db.commit()
    db.refresh(claim)
    return claim
