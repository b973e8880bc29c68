"""
Document generation: plan the batch, then render and persist each item in turn.

Per item the pipeline is assemble payload -> render -> store bytes -> document
row -> audit entry -> stage/status transition. A failure stops that item only;
the remaining items still run.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx
from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from casedesk.core.config import settings
from casedesk.models.case import Case
from casedesk.models.document import Document
from casedesk.models.enums import DefaultSelection, DocumentCategory, GenerationMode, GenerationStatus
from casedesk.services.activity_log import log_activity
from casedesk.services.payload import (
    FirmInfo,
    compute_case_figures,
    document_name,
    prepare_document_payload_with_mode,
)
from casedesk.services.records import CaseRecords, load_case_records
from casedesk.services.renderer import RenderError, call_renderer
from casedesk.services.storage import StorageError, save_artifact
from casedesk.services.templates import (
    HIPAA_REQUEST,
    THIRD_PARTY_LOR,
    TemplateRule,
    get_template_rule,
    target_stage_status,
)

logger = logging.getLogger(__name__)

CATEGORY_BY_TEMPLATE: dict[str, DocumentCategory] = {
    HIPAA_REQUEST: DocumentCategory.MEDICAL,
    "reduction_request": DocumentCategory.MEDICAL,
    "proposed_settlement_statement": DocumentCategory.SETTLEMENT,
    "offer_acceptance": DocumentCategory.SETTLEMENT,
    "payment_instructions": DocumentCategory.SETTLEMENT,
}


@dataclass
class GenerationItem:
    index: int
    document_name: str
    client_id: int | None = None
    provider_id: int | None = None
    status: GenerationStatus = GenerationStatus.PENDING
    error: str | None = None
    document_id: int | None = None


@dataclass
class BatchResult:
    case_id: int
    template_type: str
    generation_mode: GenerationMode
    items: list[GenerationItem] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for i in self.items if i.status == GenerationStatus.SUCCESS)

    @property
    def error_count(self) -> int:
        return sum(1 for i in self.items if i.status == GenerationStatus.ERROR)


def _rule_or_400(template_type: str) -> TemplateRule:
    try:
        return get_template_rule(template_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def _selected_clients(records: CaseRecords, rule: TemplateRule, client_ids: list[int] | None) -> list[Any]:
    if client_ids:
        chosen = []
        for cid in client_ids:
            c = records.client(cid)
            if c is None:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Client {cid} is not on this case")
            chosen.append(c)
        return chosen

    if rule.default_selection == DefaultSelection.MANUAL:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Select at least one client")
    if rule.default_selection == DefaultSelection.DRIVER_ONLY:
        drivers = [c for c in records.clients if c.is_driver]
        if drivers:
            return drivers
        return [records.primary_client] if records.primary_client else []
    return list(records.clients)


def plan_generation(
    records: CaseRecords,
    template_type: str,
    *,
    client_ids: list[int] | None = None,
    provider_ids: list[int] | None = None,
) -> list[GenerationItem]:
    """Expand a request into batch items. Validation only; no I/O."""
    rule = _rule_or_400(template_type)
    mode = rule.generation_mode
    case_id = records.case.id

    def name(client: Any | None = None, provider: Any | None = None) -> str:
        return document_name(
            mode,
            document_type_name=rule.display_name,
            case_id=case_id,
            clients=records.clients,
            target_client=client,
            provider=provider,
        )

    if mode in (GenerationMode.ALL_CLIENTS, GenerationMode.CASE_LEVEL):
        return [GenerationItem(index=1, document_name=name())]

    clients = _selected_clients(records, rule, client_ids)
    items: list[GenerationItem] = []
    if mode == GenerationMode.PER_CLIENT:
        for c in clients:
            items.append(GenerationItem(index=len(items) + 1, document_name=name(c), client_id=c.id))
    else:
        wanted = set(provider_ids or ())
        for c in clients:
            seen: set[int] = set()
            for bill in records.bills_for(c.id):
                pid = bill.medical_provider_id
                if pid is None or pid in seen or (wanted and pid not in wanted):
                    continue
                seen.add(pid)
                items.append(
                    GenerationItem(
                        index=len(items) + 1,
                        document_name=name(c, bill.medical_provider),
                        client_id=c.id,
                        provider_id=pid,
                    )
                )

    if not items:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Nothing to generate for this selection")
    return items


def record_document(
    db: Session,
    *,
    case_id: int,
    file_name: str,
    storage_path: str,
    file_size: int,
    file_url: str | None = None,
    category: DocumentCategory = DocumentCategory.LETTERS,
    uploaded_by: str = "Admin",
) -> Document:
    doc = Document(
        case_id=case_id,
        file_name=file_name,
        file_type="application/pdf",
        file_size=file_size,
        storage_path=storage_path,
        file_url=file_url,
        category=category,
        uploaded_by=uploaded_by,
    )
    db.add(doc)
    db.commit()
    db.refresh(doc)
    return doc


def apply_stage_transition(db: Session, case: Case, template_type: str, *, user_name: str = "Admin") -> bool:
    """Move the case to the stage/status the template implies. No-op (and no audit entry) if already there."""
    new_stage, new_status = target_stage_status(template_type, case.stage, case.status)
    if (new_stage, new_status) == (case.stage, case.status):
        return False

    old_stage, old_status = case.stage, case.status
    case.stage = new_stage
    case.status = new_status
    db.commit()
    logger.info(
        "case %s moved %s/%s -> %s/%s after %s",
        case.id,
        old_stage.value,
        old_status,
        new_stage.value,
        new_status,
        template_type,
    )
    log_activity(
        db,
        case_id=case.id,
        action="status_change",
        entity_type="case",
        entity_id=case.id,
        user_name=user_name,
        description=f"Stage/status updated to {new_stage.value} - {new_status} after generating {template_type}",
        details={
            "old_stage": old_stage.value,
            "old_status": old_status,
            "new_stage": new_stage.value,
            "new_status": new_status,
        },
    )
    return True


def mark_third_party_lor(db: Session, records: CaseRecords, *, on: dt.date) -> int:
    """Flag every third-party claim on the case as having received its LOR. Returns rows changed."""
    changed = 0
    for claim in records.third_party_claims.values():
        if claim.lor_sent:
            continue
        claim.lor_sent = True
        claim.lor_date = on
        changed += 1
    if changed:
        db.commit()
    return changed


def preview_payload(
    db: Session,
    *,
    case_id: int,
    template_type: str,
    client_id: int | None = None,
    provider_id: int | None = None,
    selected_party: str | None = None,
    today: dt.date | None = None,
) -> dict[str, Any]:
    rule = _rule_or_400(template_type)
    records = load_case_records(db, case_id)
    client = None
    if client_id is not None:
        client = records.client(client_id)
        if client is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Client {client_id} is not on this case")
    inputs = records.inputs_for(client, provider_id=provider_id, selected_party=selected_party)
    return prepare_document_payload_with_mode(
        template_type,
        rule.generation_mode,
        inputs,
        firm=FirmInfo.from_settings(settings),
        today=today,
        figures=compute_case_figures(inputs, statute_years=settings.statute_years),
        document_type_name=rule.display_name,
    )


def generate_documents(
    db: Session,
    *,
    case_id: int,
    template_type: str,
    client_ids: list[int] | None = None,
    provider_ids: list[int] | None = None,
    selected_party: str | None = None,
    requested_by: str = "Admin",
    today: dt.date | None = None,
) -> BatchResult:
    """
    Sequential batch generation. Request-level problems (unknown case or
    template, empty selection, renderer not configured) raise before anything
    is rendered; item-level failures are recorded on the item.
    """
    rule = _rule_or_400(template_type)
    if not settings.renderer_webhook_url:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Document renderer is not configured")

    records = load_case_records(db, case_id)
    items = plan_generation(records, template_type, client_ids=client_ids, provider_ids=provider_ids)
    today = today or dt.date.today()
    firm = FirmInfo.from_settings(settings)
    figures = compute_case_figures(records.inputs_for(), statute_years=settings.statute_years)
    category = CATEGORY_BY_TEMPLATE.get(template_type, DocumentCategory.LETTERS)
    result = BatchResult(case_id=case_id, template_type=template_type, generation_mode=rule.generation_mode, items=items)

    for item in items:
        item.status = GenerationStatus.GENERATING
        logger.info("case %s: generating %s (%d/%d)", case_id, item.document_name, item.index, len(items))
        try:
            client = records.client(item.client_id) if item.client_id is not None else None
            inputs = records.inputs_for(client, provider_id=item.provider_id, selected_party=selected_party)
            payload = prepare_document_payload_with_mode(
                template_type,
                rule.generation_mode,
                inputs,
                firm=firm,
                today=today,
                figures=figures,
                document_type_name=rule.display_name,
            )
            rendered = call_renderer(
                settings.renderer_webhook_url,
                payload,
                timeout=settings.renderer_timeout_seconds,
                fetch_attempts=settings.artifact_fetch_attempts,
            )
            stored = save_artifact(case_id, rendered.filename, rendered.content)
            doc = record_document(
                db,
                case_id=case_id,
                file_name=rendered.filename,
                storage_path=stored.storage_path,
                file_size=stored.size,
                file_url=stored.url,
                category=category,
                uploaded_by=requested_by,
            )
            item.document_id = doc.id
            log_activity(
                db,
                case_id=case_id,
                action="document_generated",
                entity_type="document",
                entity_id=doc.id,
                user_name=requested_by,
                description=f"Generated {item.document_name}",
                details={"template_type": template_type, "file_name": rendered.filename},
            )
            apply_stage_transition(db, records.case, template_type, user_name=requested_by)
            if template_type == THIRD_PARTY_LOR:
                mark_third_party_lor(db, records, on=today)
        except (RenderError, StorageError, httpx.HTTPError) as e:
            item.status = GenerationStatus.ERROR
            item.error = str(e) or e.__class__.__name__
            logger.warning("case %s: %s failed: %s", case_id, item.document_name, item.error)
            continue
        except SQLAlchemyError as e:
            db.rollback()
            item.status = GenerationStatus.ERROR
            item.error = f"Database error: {e.__class__.__name__}"
            logger.warning("case %s: %s failed to persist: %s", case_id, item.document_name, e)
            continue
        item.status = GenerationStatus.SUCCESS

    logger.info(
        "case %s: %s batch finished, %d succeeded, %d failed",
        case_id,
        template_type,
        result.success_count,
        result.error_count,
    )
    return result


def list_documents(db: Session, case_id: int) -> list[Document]:
    return db.query(Document).filter(Document.case_id == case_id).order_by(Document.created_at.desc(), Document.id.desc()).all()
