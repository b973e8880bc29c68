"""Pytest fixtures for CaseDesk tests."""

import datetime as dt
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from casedesk.db.session import Base

# Ensure all models are loaded for create_all
import casedesk.models  # noqa: F401
from casedesk.models import (
    Adjuster,
    Case,
    Client,
    Defendant,
    FirstPartyClaim,
    InsuranceCarrier,
    MedicalBill,
    MedicalProvider,
    ThirdPartyClaim,
)


@pytest.fixture(scope="function")
def db():
    """Create an in-memory SQLite DB with all tables for tests."""
    # StaticPool: API tests run route handlers on another thread against the same in-memory DB.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def case_with_clients(db):
    """Case with three clients (the first is the driver), one defendant, two providers."""
    c = Case(date_of_loss=dt.date(2023, 3, 15), wreck_city="Tulsa", wreck_county="Tulsa")
    db.add(c)
    db.flush()

    clients = [
        Client(case_id=c.id, client_number=1, first_name="Ana", last_name="Reyes", is_driver=True),
        Client(case_id=c.id, client_number=2, first_name="Ben", last_name="Reyes"),
        Client(case_id=c.id, client_number=3, first_name="Cara", last_name="Reyes"),
    ]
    db.add_all(clients)

    carrier = InsuranceCarrier(name="Sooner Mutual", kind="auto")
    db.add(carrier)
    db.flush()
    first_adj = Adjuster(carrier_id=carrier.id, first_name="Fay", last_name="First", email="fay@sooner.test")
    third_adj = Adjuster(carrier_id=carrier.id, first_name="Tom", last_name="Third", email="tom@other.test")
    db.add_all([first_adj, third_adj])

    d = Defendant(case_id=c.id, first_name="Dan", last_name="Driver", liability_percentage=Decimal("100"))
    db.add(d)
    db.flush()

    db.add(FirstPartyClaim(client_id=clients[0].id, carrier_id=carrier.id, adjuster_id=first_adj.id, claim_number="FP-1"))
    db.add(
        ThirdPartyClaim(
            defendant_id=d.id, carrier_id=carrier.id, adjuster_id=third_adj.id, claim_number="TP-9", lor_sent=False
        )
    )

    clinic = MedicalProvider(name="Tulsa Clinic", email="records@clinic.test")
    imaging = MedicalProvider(name="Imaging Center")
    db.add_all([clinic, imaging])
    db.flush()
    db.add_all(
        [
            MedicalBill(
                client_id=clients[0].id,
                medical_provider_id=clinic.id,
                amount_billed=Decimal("1200.00"),
                insurance_adjusted=Decimal("200.00"),
            ),
            MedicalBill(client_id=clients[0].id, medical_provider_id=imaging.id, amount_billed=Decimal("800.00")),
            MedicalBill(client_id=clients[1].id, medical_provider_id=clinic.id, amount_billed=Decimal("300.00")),
        ]
    )
    db.commit()
    db.refresh(c)
    return c
