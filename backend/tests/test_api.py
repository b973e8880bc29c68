import datetime as dt

import pytest
from fastapi.testclient import TestClient

from casedesk.db.session import get_db
from casedesk.main import app
from casedesk.models import ActivityLog
from casedesk.services.cases import to_case_out


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = lambda: db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _new_case(client, **kw):
    r = client.post("/cases/", json={"date_of_loss": "2023-03-15", **kw})
    assert r.status_code == 200, r.text
    return r.json()


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_create_case_defaults_and_statute(client):
    body = _new_case(client)
    assert body["stage"] == "Intake"
    assert body["status"] == "New"
    assert body["statute_deadline"] == "2025-03-15"
    assert body["case_name"] == "Unknown Case"


def test_status_must_belong_to_stage(client):
    case_id = _new_case(client)["id"]
    r = client.patch(f"/cases/{case_id}/status", json={"stage": "Intake", "status": "Demand Sent"})
    assert r.status_code == 422

    r = client.patch(f"/cases/{case_id}/status", json={"stage": "Demand", "status": "Demand Sent"})
    assert r.status_code == 200
    assert r.json()["stage"] == "Demand"


def test_archive_hides_case_from_default_list(client):
    case_id = _new_case(client)["id"]
    assert client.post(f"/cases/{case_id}/archive").json()["is_archived"] is True
    assert [c["id"] for c in client.get("/cases/").json()] == []
    assert [c["id"] for c in client.get("/cases/", params={"include_archived": True}).json()] == [case_id]
    assert client.post(f"/cases/{case_id}/unarchive").json()["is_archived"] is False


def test_unknown_case_is_404(client):
    assert client.get("/cases/999").status_code == 404
    assert client.get("/cases/999/documents/").status_code == 404


def test_liability_is_advisory(client):
    case_id = _new_case(client)["id"]
    r = client.post(f"/cases/{case_id}/defendants", json={"first_name": "A", "last_name": "One", "liability_percentage": "60"})
    assert r.status_code == 200
    assert r.json()["liability"]["message"] == "Total liability is 60% (under 100%)"

    r = client.post(
        f"/cases/{case_id}/defendants",
        json={"first_name": "B", "last_name": "Two", "defendant_number": 2, "liability_percentage": "50"},
    )
    assert r.status_code == 200
    assert r.json()["liability"]["status"] == "exceeds"
    assert len(client.get(f"/cases/{case_id}/defendants").json()["defendants"]) == 2


def test_bill_balance_and_financials(client):
    case_id = _new_case(client)["id"]
    person = client.post(f"/cases/{case_id}/clients", json={"first_name": "Ana", "last_name": "Reyes"}).json()
    provider = client.post("/medical-providers/", json={"name": "Tulsa Clinic"}).json()

    r = client.post(
        f"/cases/{case_id}/medical-bills/",
        json={
            "client_id": person["id"],
            "medical_provider_id": provider["id"],
            "amount_billed": "1000",
            "insurance_paid": "400",
            "insurance_adjusted": "100",
        },
    )
    assert r.status_code == 200, r.text
    assert r.json()["balance_due"] == "500.00"
    assert r.json()["provider_name"] == "Tulsa Clinic"

    r = client.post(f"/cases/{case_id}/mileage", json={"miles": "10", "rate_per_mile": "0.70"})
    assert r.json()["total"] == "7.00"

    fin = client.get(f"/cases/{case_id}/financials").json()
    assert fin["totals"]["total_billed"] == "1000.00"
    assert fin["damages"]["special_damages_total"] == "1107.00"


def test_settlement_preview_and_save(client):
    r = client.post(
        "/settlements/preview",
        json={"gross_settlement": "10000", "attorney_fee_percentage": "33.33", "case_expenses": "500", "medical_liens": "1000"},
    )
    assert r.json()["attorney_fee"] == "3333.00"
    assert r.json()["client_net"] == "5167.00"

    case_id = _new_case(client)["id"]
    r = client.put(f"/cases/{case_id}/settlement/", json={"gross_settlement": "1000", "attorney_fee_percentage": "50", "case_expenses": "600"})
    assert r.status_code == 200
    assert r.json()["client_net"] == "0.00"
    assert r.json()["status"] == "Pending"


def test_payload_preview_endpoint(client):
    case_id = _new_case(client)["id"]
    r = client.post(f"/cases/{case_id}/documents/payload", json={"template_type": "third_party_lor"})
    assert r.status_code == 200
    payload = r.json()["payload"]
    assert payload["statute_date_2_years"] == "March 15, 2025"
    assert payload["generation_mode"] == "all_clients"
    assert None not in payload.values()


def test_status_change_is_audited(client, db):
    case_id = _new_case(client)["id"]
    client.patch(f"/cases/{case_id}/status", json={"stage": "Processing", "status": "Treating", "updated_by": "Vikki"})
    entries = client.get(f"/cases/{case_id}/activity/").json()
    assert entries[0]["action"] == "status_change"
    assert entries[0]["user_name"] == "Vikki"
    assert db.query(ActivityLog).filter(ActivityLog.case_id == case_id).count() == 2


def test_days_open_and_days_left(db, case_with_clients):
    out = to_case_out(case_with_clients, today=dt.date(2025, 3, 5))
    assert out["statute_deadline"] == dt.date(2025, 3, 15)
    assert out["statute_days_left"] == 10
    assert out["case_name"] == "Ana Reyes"


def test_oversized_amount_is_rejected(client):
    r = client.post("/settlements/preview", json={"gross_settlement": "1e30"})
    assert r.status_code == 422
