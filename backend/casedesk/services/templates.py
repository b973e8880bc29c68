from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from casedesk.models.enums import CASE_STATUSES, CaseStage, DefaultSelection, GenerationMode


@dataclass(frozen=True)
class TemplateRule:
    display_name: str
    generation_mode: GenerationMode
    allows_client_selection: bool = False
    default_selection: DefaultSelection = DefaultSelection.ALL


FIRST_PARTY_LOR = "first_party_lor"
THIRD_PARTY_LOR = "third_party_lor"
HIPAA_REQUEST = "hipaa_request"
SUBRO_LETTER = "subro_letter"

DOCUMENT_TEMPLATES: dict[str, TemplateRule] = {
    # Letters of representation
    FIRST_PARTY_LOR: TemplateRule("1st Party LOR", GenerationMode.PER_CLIENT, True, DefaultSelection.DRIVER_ONLY),
    THIRD_PARTY_LOR: TemplateRule("3rd Party LOR", GenerationMode.ALL_CLIENTS),
    "engagement_letter": TemplateRule("Engagement Letter", GenerationMode.PER_CLIENT, True, DefaultSelection.ALL),
    # Medical records
    HIPAA_REQUEST: TemplateRule("HIPAA Records Request", GenerationMode.PER_CLIENT_PROVIDER, True, DefaultSelection.ALL),
    SUBRO_LETTER: TemplateRule("Subrogation Letter", GenerationMode.PER_CLIENT, True, DefaultSelection.MANUAL),
    # Demand phase
    "demand_rear_end": TemplateRule("Demand Letter (Rear End)", GenerationMode.ALL_CLIENTS),
    "demand_lane_change": TemplateRule("Demand Letter (Lane Change)", GenerationMode.ALL_CLIENTS),
    "demand_t_bone": TemplateRule("Demand Letter (T-Bone)", GenerationMode.ALL_CLIENTS),
    "um_uim_demand": TemplateRule("UM/UIM Demand", GenerationMode.ALL_CLIENTS),
    "med_pay_demand": TemplateRule("MedPay Demand", GenerationMode.PER_CLIENT, True, DefaultSelection.DRIVER_ONLY),
    "counter_demand": TemplateRule("Counter Demand", GenerationMode.ALL_CLIENTS),
    "reduction_request": TemplateRule("Reduction Request", GenerationMode.PER_CLIENT_PROVIDER, True, DefaultSelection.ALL),
    # Settlement
    "proposed_settlement_statement": TemplateRule("Proposed Settlement Statement", GenerationMode.CASE_LEVEL),
    "offer_acceptance": TemplateRule("Offer Acceptance", GenerationMode.CASE_LEVEL),
    "payment_instructions": TemplateRule("Payment Instructions", GenerationMode.CASE_LEVEL),
}

# Template -> demand-phase status set after a successful render.
DOCUMENT_STATUS_MAP: dict[str, str] = {
    "demand_rear_end": "Demand Sent",
    "demand_lane_change": "Demand Sent",
    "demand_t_bone": "Demand Sent",
    "um_uim_demand": "Demand Sent",
    "med_pay_demand": "Demand Sent",
    "counter_demand": "Counter Sent",
    "reduction_request": "Reduction Sent",
    "proposed_settlement_statement": "Proposed Settlement Statement Sent",
    "offer_acceptance": "Release Sent",
    "payment_instructions": "Payment Instructions Sent",
}

# Template -> (stage, status) set after a successful render. Wins over DOCUMENT_STATUS_MAP.
DOCUMENT_STAGE_MAP: dict[str, tuple[CaseStage, str]] = {
    FIRST_PARTY_LOR: (CaseStage.PROCESSING, "Treating"),
    THIRD_PARTY_LOR: (CaseStage.PROCESSING, "Treating"),
    "engagement_letter": (CaseStage.PROCESSING, "Treating"),
    HIPAA_REQUEST: (CaseStage.PROCESSING, "Treating"),
    SUBRO_LETTER: (CaseStage.PROCESSING, "Awaiting Subro"),
}


def get_template_rule(template_key: str) -> TemplateRule:
    try:
        return DOCUMENT_TEMPLATES[template_key]
    except KeyError:
        raise ValueError(f"Unknown document template: {template_key}") from None


def target_stage_status(template_key: str, current_stage: CaseStage, current_status: str) -> tuple[CaseStage, str]:
    """Stage/status a case should move to after `template_key` is generated."""
    if template_key in DOCUMENT_STAGE_MAP:
        return DOCUMENT_STAGE_MAP[template_key]
    if template_key in DOCUMENT_STATUS_MAP:
        new_status = DOCUMENT_STATUS_MAP[template_key]
        if new_status in CASE_STATUSES[CaseStage.DEMAND]:
            return CaseStage.DEMAND, new_status
        return current_stage, new_status
    return current_stage, current_status


def recipient_email(
    template_key: str,
    *,
    first_party_claim: Any | None = None,
    third_party_claim: Any | None = None,
    health_claim: Any | None = None,
    medical_provider: Any | None = None,
    selected_party: str | None = None,
) -> str:
    def adjuster_email(claim: Any | None) -> str:
        adjuster = getattr(claim, "adjuster", None) if claim is not None else None
        return (getattr(adjuster, "email", None) or "") if adjuster is not None else ""

    if template_key == FIRST_PARTY_LOR or selected_party == "first":
        return adjuster_email(first_party_claim)
    if template_key == THIRD_PARTY_LOR or selected_party == "third":
        return adjuster_email(third_party_claim)
    if template_key == HIPAA_REQUEST:
        return (getattr(medical_provider, "email", None) or "") if medical_provider is not None else ""
    if template_key == SUBRO_LETTER:
        return adjuster_email(health_claim)
    return ""
