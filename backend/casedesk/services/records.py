from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from casedesk.models.case import Case
from casedesk.models.client import Client
from casedesk.models.defendant import Defendant
from casedesk.models.insurance import FirstPartyClaim, HealthClaim, ThirdPartyClaim
from casedesk.models.medical import MedicalBill
from casedesk.services.payload import PayloadInputs
from casedesk.services.settlement import get_current_settlement


@dataclass
class CaseRecords:
    """Everything document generation reads for one case, loaded once per batch."""

    case: Case
    clients: list[Client]
    defendants: list[Defendant]
    medical_bills: list[MedicalBill]
    mileage_logs: list[Any]
    general_damages: Any | None
    settlement: Any | None
    first_party_claims: dict[int, FirstPartyClaim] = field(default_factory=dict)  # client_id ->
    third_party_claims: dict[int, ThirdPartyClaim] = field(default_factory=dict)  # defendant_id ->
    health_claims: dict[int, HealthClaim] = field(default_factory=dict)  # client_id ->

    @property
    def primary_client(self) -> Client | None:
        return next((c for c in self.clients if c.client_number == 1), self.clients[0] if self.clients else None)

    @property
    def primary_defendant(self) -> Defendant | None:
        return self.defendants[0] if self.defendants else None

    def client(self, client_id: int) -> Client | None:
        return next((c for c in self.clients if c.id == client_id), None)

    def bills_for(self, client_id: int) -> list[MedicalBill]:
        return [b for b in self.medical_bills if b.client_id == client_id]

    def inputs_for(
        self,
        client: Client | None = None,
        *,
        provider_id: int | None = None,
        selected_party: str | None = None,
    ) -> PayloadInputs:
        client = client or self.primary_client
        defendant = self.primary_defendant
        return PayloadInputs(
            casefile=self.case,
            clients=self.clients,
            client=client,
            defendant=defendant,
            medical_bills=self.medical_bills,
            mileage_logs=self.mileage_logs,
            first_party_claim=self.first_party_claims.get(client.id) if client else None,
            third_party_claim=self.third_party_claims.get(defendant.id) if defendant else None,
            health_claim=self.health_claims.get(client.id) if client else None,
            general_damages=self.general_damages,
            settlement=self.settlement,
            provider_id=provider_id,
            selected_party=selected_party,
        )


def _first_by(rows: list[Any], key: str) -> dict[int, Any]:
    out: dict[int, Any] = {}
    for row in rows:
        out.setdefault(getattr(row, key), row)
    return out


def load_case_records(db: Session, case_id: int) -> CaseRecords:
    case = db.query(Case).filter(Case.id == case_id).first()
    if not case:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Case not found")

    clients = list(case.clients)
    defendants = list(case.defendants)
    client_ids = [c.id for c in clients]
    defendant_ids = [d.id for d in defendants]

    bills: list[MedicalBill] = []
    first_party: list[FirstPartyClaim] = []
    health: list[HealthClaim] = []
    third_party: list[ThirdPartyClaim] = []
    if client_ids:
        bills = (
            db.query(MedicalBill)
            .filter(MedicalBill.client_id.in_(client_ids))
            .order_by(MedicalBill.date_of_service.asc().nulls_last(), MedicalBill.id.asc())
            .all()
        )
        first_party = (
            db.query(FirstPartyClaim)
            .filter(FirstPartyClaim.client_id.in_(client_ids))
            .order_by(FirstPartyClaim.id.asc())
            .all()
        )
        health = db.query(HealthClaim).filter(HealthClaim.client_id.in_(client_ids)).order_by(HealthClaim.id.asc()).all()
    if defendant_ids:
        third_party = (
            db.query(ThirdPartyClaim)
            .filter(ThirdPartyClaim.defendant_id.in_(defendant_ids))
            .order_by(ThirdPartyClaim.id.asc())
            .all()
        )

    return CaseRecords(
        case=case,
        clients=clients,
        defendants=defendants,
        medical_bills=bills,
        mileage_logs=list(case.mileage_logs),
        general_damages=case.general_damages,
        settlement=get_current_settlement(db, case_id),
        first_party_claims=_first_by(first_party, "client_id"),
        third_party_claims=_first_by(third_party, "defendant_id"),
        health_claims=_first_by(health, "client_id"),
    )
