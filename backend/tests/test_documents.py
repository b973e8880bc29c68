import datetime as dt

import httpx
import pytest
from fastapi import HTTPException

import casedesk.services.documents as documents
from casedesk.core.config import settings
from casedesk.models import ActivityLog, Document, ThirdPartyClaim
from casedesk.models.enums import CaseStage, GenerationStatus
from casedesk.services.records import load_case_records
from casedesk.services.renderer import RenderError, RenderedDocument, call_renderer

TODAY = dt.date(2025, 1, 10)


@pytest.fixture
def renderer(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "renderer_webhook_url", "https://render.test/webhook/doc")
    monkeypatch.setattr(settings, "document_storage_dir", str(tmp_path))
    calls = []

    def fake_call_renderer(url, payload, **kw):
        calls.append(payload)
        if payload["Client::firstName"] == "Ben":
            raise RenderError("HTTP 500: Internal Server Error")
        return RenderedDocument(content=b"%PDF-1.7", filename=f"{payload['document_name']}.pdf")

    monkeypatch.setattr(documents, "call_renderer", fake_call_renderer)
    return calls


def test_batch_isolates_a_failing_item(db, case_with_clients, renderer, tmp_path):
    result = documents.generate_documents(
        db, case_id=case_with_clients.id, template_type="engagement_letter", today=TODAY
    )

    assert [i.status for i in result.items] == [
        GenerationStatus.SUCCESS,
        GenerationStatus.ERROR,
        GenerationStatus.SUCCESS,
    ]
    assert result.success_count == 2
    assert result.error_count == 1
    assert "HTTP 500" in result.items[1].error
    assert len(renderer) == 3

    docs = db.query(Document).filter(Document.case_id == case_with_clients.id).all()
    assert len(docs) == 2
    assert all((tmp_path / d.storage_path).read_bytes() == b"%PDF-1.7" for d in docs)
    assert {d.file_name for d in docs} == {"Engagement Letter - Ana Reyes.pdf", "Engagement Letter - Cara Reyes.pdf"}


def test_stage_transition_is_applied_once(db, case_with_clients, renderer):
    documents.generate_documents(db, case_id=case_with_clients.id, template_type="engagement_letter", today=TODAY)
    db.refresh(case_with_clients)
    assert case_with_clients.stage == CaseStage.PROCESSING
    assert case_with_clients.status == "Treating"

    changes = db.query(ActivityLog).filter(ActivityLog.action == "status_change").count()
    assert changes == 1


def test_demand_status_moves_stage_to_demand(db, case_with_clients):
    changed = documents.apply_stage_transition(db, case_with_clients, "counter_demand")
    assert changed is True
    assert case_with_clients.stage == CaseStage.DEMAND
    assert case_with_clients.status == "Counter Sent"
    assert documents.apply_stage_transition(db, case_with_clients, "counter_demand") is False


def test_third_party_lor_marks_claim(db, case_with_clients, renderer):
    result = documents.generate_documents(
        db, case_id=case_with_clients.id, template_type="third_party_lor", today=TODAY
    )
    assert result.success_count == 1
    assert result.items[0].document_name == "3rd Party LOR - Ana Reyes"

    claim = db.query(ThirdPartyClaim).one()
    assert claim.lor_sent is True
    assert claim.lor_date == TODAY


def test_first_party_lor_defaults_to_drivers(db, case_with_clients):
    records = load_case_records(db, case_with_clients.id)
    items = documents.plan_generation(records, "first_party_lor")
    assert [i.document_name for i in items] == ["1st Party LOR - Ana Reyes"]


def test_hipaa_plans_one_item_per_client_provider(db, case_with_clients):
    records = load_case_records(db, case_with_clients.id)
    items = documents.plan_generation(records, "hipaa_request")
    assert [i.document_name for i in items] == [
        "HIPAA Records Request - Ana Reyes - Tulsa Clinic",
        "HIPAA Records Request - Ana Reyes - Imaging Center",
        "HIPAA Records Request - Ben Reyes - Tulsa Clinic",
    ]


def test_manual_selection_requires_clients(db, case_with_clients):
    records = load_case_records(db, case_with_clients.id)
    with pytest.raises(HTTPException) as e:
        documents.plan_generation(records, "subro_letter")
    assert e.value.status_code == 400


def test_unknown_client_is_rejected(db, case_with_clients):
    records = load_case_records(db, case_with_clients.id)
    with pytest.raises(HTTPException) as e:
        documents.plan_generation(records, "engagement_letter", client_ids=[9999])
    assert e.value.status_code == 400


def test_unknown_template_is_rejected_before_rendering(db, case_with_clients, renderer):
    with pytest.raises(HTTPException) as e:
        documents.generate_documents(db, case_id=case_with_clients.id, template_type="nope")
    assert e.value.status_code == 400
    assert renderer == []


def test_unconfigured_renderer_is_rejected(db, case_with_clients, monkeypatch):
    monkeypatch.setattr(settings, "renderer_webhook_url", None)
    with pytest.raises(HTTPException) as e:
        documents.generate_documents(db, case_id=case_with_clients.id, template_type="engagement_letter")
    assert e.value.status_code == 503


def test_preview_payload_has_no_side_effects(db, case_with_clients):
    payload = documents.preview_payload(
        db, case_id=case_with_clients.id, template_type="first_party_lor", today=TODAY
    )
    assert payload["recipient_email"] == "fay@sooner.test"
    assert payload["statute_date_2_years"] == "March 15, 2025"
    assert payload["total_billed"] == 2300.0
    assert db.query(Document).count() == 0


def test_malformed_renderer_reply_fails_only_that_item(db, case_with_clients, monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "renderer_webhook_url", "https://render.test/webhook/doc")
    monkeypatch.setattr(settings, "document_storage_dir", str(tmp_path))

    def real_renderer_with_fake_webhook(url, payload, **kw):
        def handler(req):
            if payload["Client::firstName"] == "Ben":
                return httpx.Response(200, json={"url": "http://[::1"})
            return httpx.Response(200, content=b"%PDF-1.7", headers={"content-type": "application/pdf"})

        return call_renderer(url, payload, transport=httpx.MockTransport(handler), **kw)

    monkeypatch.setattr(documents, "call_renderer", real_renderer_with_fake_webhook)
    result = documents.generate_documents(
        db, case_id=case_with_clients.id, template_type="engagement_letter", today=TODAY
    )

    assert [i.status for i in result.items] == [
        GenerationStatus.SUCCESS,
        GenerationStatus.ERROR,
        GenerationStatus.SUCCESS,
    ]
    assert "invalid document URL" in result.items[1].error
    assert db.query(Document).filter(Document.case_id == case_with_clients.id).count() == 2
