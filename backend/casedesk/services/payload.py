"""
Document payload assembly.

Every placeholder the rendering workflow understands is declared once in
PAYLOAD_FIELDS as (source path(s), default, formatter); ALIASES re-expose a
canonical key under the other names older templates use. The payload is built
mechanically from those two tables, so a missing record can only ever yield
the declared default.
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from casedesk.core.config import Settings
from casedesk.models.enums import GenerationMode
from casedesk.services.damages import GENERAL_DAMAGE_CATEGORIES, Damages, compute_damages
from casedesk.services.financials import MedicalTotals, aggregate_financials, record_value
from casedesk.services.formatting import (
    case_name,
    format_currency,
    format_date,
    format_percentage,
    format_ssn,
    money_number,
    yes_no,
)
from casedesk.services.settlement import SettlementSplit, split_settlement
from casedesk.services.statute import STATUTE_YEARS, statute_deadline
from casedesk.services.templates import recipient_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FirmInfo:
    name: str = ""
    attorney: str = ""
    processing_company: str = ""
    mailing_address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    phone: str = ""
    fax: str = ""
    email: str = ""
    logo_url: str = ""

    @classmethod
    def from_settings(cls, s: Settings) -> FirmInfo:
        return cls(
            name=s.firm_name,
            attorney=s.firm_attorney,
            processing_company=s.firm_processing_company,
            mailing_address=s.firm_mailing_address,
            city=s.firm_city,
            state=s.firm_state,
            zip=s.firm_zip,
            phone=s.firm_phone,
            fax=s.firm_fax,
            email=s.firm_email,
            logo_url=s.firm_logo_url,
        )


@dataclass(frozen=True)
class PayloadInputs:
    casefile: Any
    clients: Sequence[Any] = ()
    client: Any | None = None
    defendant: Any | None = None
    medical_bills: Sequence[Any] = ()
    mileage_logs: Sequence[Any] = ()
    first_party_claim: Any | None = None
    third_party_claim: Any | None = None
    health_claim: Any | None = None
    general_damages: Any | None = None
    settlement: Any | None = None
    provider_id: int | None = None
    selected_party: str | None = None  # first | third


@dataclass(frozen=True)
class CaseFigures:
    totals: MedicalTotals
    damages: Damages
    split: SettlementSplit | None
    statute_deadline: dt.date | None


def compute_case_figures(inputs: PayloadInputs, *, statute_years: int = STATUTE_YEARS) -> CaseFigures:
    totals = aggregate_financials(inputs.medical_bills, inputs.mileage_logs)
    damages = compute_damages(totals, inputs.general_damages)
    split = None
    s = inputs.settlement
    if s is not None:
        split = split_settlement(
            record_value(s, "gross_settlement"),
            record_value(s, "attorney_fee_percentage"),
            record_value(s, "case_expenses"),
            record_value(s, "medical_liens"),
        )
    deadline = statute_deadline(record_value(inputs.casefile, "date_of_loss"), years=statute_years)
    return CaseFigures(totals=totals, damages=damages, split=split, statute_deadline=deadline)


# ---------------------------------------------------------------------------
# Field table
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PayloadField:
    source: str | tuple[str, ...]
    default: Any = "N/A"
    formatter: Callable[[Any], Any] | None = None
    sources: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sources", (self.source,) if isinstance(self.source, str) else tuple(self.source))


def _enum_value(v: Any) -> Any:
    return getattr(v, "value", v)


def _text(source: str | tuple[str, ...], default: Any = "N/A") -> PayloadField:
    return PayloadField(source, default, lambda v: str(_enum_value(v)).strip())


def _date(source: str | tuple[str, ...], default: Any = "N/A") -> PayloadField:
    return PayloadField(source, default, format_date)


def _money(source: str) -> PayloadField:
    return PayloadField(source, 0, money_number)


def _currency(source: str) -> PayloadField:
    return PayloadField(source, "$0.00", format_currency)


def _adjuster_fields(prefix: str, ns: str) -> dict[str, PayloadField]:
    return {
        f"{prefix}::fullName": _text(f"{ns}.adjuster.full_name"),
        f"{prefix}::phone": _text(f"{ns}.adjuster.phone"),
        f"{prefix}::email": _text(f"{ns}.adjuster.email"),
        f"{prefix}::fax": _text(f"{ns}.adjuster.fax"),
    }


PAYLOAD_FIELDS: dict[str, PayloadField] = {
    "template_type": _text("meta.template_type", ""),
    "case_id": PayloadField("meta.case_id", 0),
    "case_number": _text("meta.case_number"),
    "current_date": _date("meta.today"),
    "current_day": _text("meta.current_day", ""),
    "current_month": _text("meta.current_month", ""),
    "current_year": _text("meta.current_year", ""),
    # Letterhead
    "LawFirm::name": _text("firm.name", ""),
    "LawFirm::attorney": _text("firm.attorney", ""),
    "LawFirm::processingCompany": _text("firm.processing_company", ""),
    "LawFirm::mailingAddress": _text("firm.mailing_address", ""),
    "LawFirm::city": _text("firm.city", ""),
    "LawFirm::state": _text("firm.state", ""),
    "LawFirm::zip": _text("firm.zip", ""),
    "LawFirm::phone": _text("firm.phone", ""),
    "LawFirm::fax": _text("firm.fax", ""),
    "LawFirm::email": _text("firm.email", ""),
    "LawFirm::logoUrl": _text("firm.logo_url", ""),
    # Client
    "Client::fullName": _text("client.full_name", ""),
    "Client::firstName": _text("client.first_name"),
    "Client::middleName": _text("client.middle_name", ""),
    "Client::lastName": _text("client.last_name"),
    "Client::dateOfBirth": _date("client.date_of_birth"),
    "Client::socialSecurityNumber": PayloadField("client.ssn", "N/A", format_ssn),
    "Client::streetAddress": _text("client.street_address"),
    "Client::city": _text("client.city"),
    "Client::state": _text(("client.state", "firm.state")),
    "Client::zip": _text("client.zip_code"),
    "Client::phone": _text("client.primary_phone"),
    "Client::secondaryPhone": _text("client.secondary_phone"),
    "Client::email": _text("client.email"),
    "Client::isDriver": PayloadField("client.is_driver", "No", yes_no),
    "Client::maritalStatus": _text("client.marital_status"),
    "Client::injuryDescription": _text("client.injury_description"),
    "client_list": _text("derived.client_list", ""),
    # Wreck
    "Wreck::date": _date("case.date_of_loss"),
    "Wreck::time": _text("case.time_of_wreck"),
    "Wreck::type": _text("case.wreck_type"),
    "Wreck::location": _text("case.wreck_street"),
    "Wreck::city": _text("case.wreck_city"),
    "Wreck::state": _text(("case.wreck_state", "firm.state")),
    "Wreck::county": _text("case.wreck_county"),
    "Wreck::policeReport": _text("case.police_report_number"),
    "Wreck::description": _text("case.wreck_description"),
    "wreck_street": _text("case.wreck_street", ""),
    "wreck_city": _text("case.wreck_city", ""),
    "wreck_state": _text("case.wreck_state", ""),
    "wreck_county": _text("case.wreck_county", ""),
    "wreck_type": _text("case.wreck_type", ""),
    "wreck_description": _text("case.wreck_description", ""),
    "police_report_number": _text("case.police_report_number", ""),
    "vehicle_description": _text("case.vehicle_description", ""),
    "damage_level": _text("case.damage_level", ""),
    "wreck_notes": _text("case.wreck_notes", ""),
    "date_of_loss": _date("case.date_of_loss"),
    # Defendant
    "Defendant::fullName": _text("defendant.full_name"),
    "Defendant::firstName": _text("defendant.first_name"),
    "Defendant::lastName": _text("defendant.last_name"),
    "Defendant::isPolicyholder": PayloadField("defendant.is_policyholder", "No", yes_no),
    "Defendant::policyholderName": _text("defendant.policyholder_name"),
    # First-party claim
    "ClientsAutoInsurer::name": _text("first_party.carrier.name"),
    "ClientsClaim::claimNumber": _text("first_party.claim_number"),
    **_adjuster_fields("ClientsAdjuster", "first_party"),
    "FirstParty::policyNumber": _text("first_party.policy_number"),
    "FirstParty::policyLimits": _text("first_party.policy_limits"),
    "FirstParty::pipAvailable": _currency("first_party.pip_available"),
    "FirstParty::pipUsed": _currency("first_party.pip_used"),
    "FirstParty::medPayAvailable": _currency("first_party.med_pay_available"),
    "FirstParty::medPayUsed": _currency("first_party.med_pay_used"),
    "first_party_adjuster_fax": _text("first_party.adjuster.fax", ""),
    "first_party_adjuster_email": _text("first_party.adjuster.email", ""),
    # Third-party claim
    "DefendantsAutoInsurer::name": _text("third_party.carrier.name"),
    "DefendantsClaim::claimNumber": _text("third_party.claim_number"),
    **_adjuster_fields("DefendantsAdjuster", "third_party"),
    "ThirdParty::policyNumber": _text("third_party.policy_number"),
    "ThirdParty::policyLimits": _text("third_party.policy_limits"),
    "third_party_adjuster_fax": _text("third_party.adjuster.fax", ""),
    "third_party_adjuster_email": _text("third_party.adjuster.email", ""),
    "third_party_claim_auto_insurance_name": _text("third_party.carrier.name", ""),
    "third_party_claim_claim_number": _text("third_party.claim_number", ""),
    # Whichever adjuster the letter goes to: third party first, then first party.
    "auto_insurance.name": _text(("third_party.carrier.name", "first_party.carrier.name"), ""),
    "claim_number": _text("third_party.claim_number", ""),
    "adjuster_full_name": _text(("third_party.adjuster.full_name", "first_party.adjuster.full_name"), ""),
    "adjuster_fax": _text(("third_party.adjuster.fax", "first_party.adjuster.fax"), ""),
    "adjuster_email": _text(("third_party.adjuster.email", "first_party.adjuster.email"), ""),
    "adjuster_street_address": _text(("third_party.adjuster.street_address", "first_party.adjuster.street_address")),
    "adjuster_city": _text(("third_party.adjuster.city", "first_party.adjuster.city")),
    "adjuster_state": _text(("third_party.adjuster.state", "first_party.adjuster.state", "firm.state")),
    "adjuster_zip_code": _text(("third_party.adjuster.zip_code", "first_party.adjuster.zip_code")),
    # Health claim
    "health_insurance_name": _text("health.carrier.name", ""),
    "health_claim_member_id": _text("health.member_id", ""),
    "health_adjuster_email": _text("health.adjuster.email", ""),
    "health_claim.health_adjuster.fax": _text("health.adjuster.fax", ""),
    "health_insurance_fax": _text("health.carrier.fax", ""),
    "health_insurance_email": _text("health.carrier.email", ""),
    # Medical provider (first bill matching the requested provider)
    "MedicalProvider::name": _text("provider.name"),
    "MedicalProvider::type": _text(("provider_bill.service_type", "provider.type"), ""),
    "MedicalProvider::streetAddress": _text("provider.street_address"),
    "MedicalProvider::city": _text("provider.city"),
    "MedicalProvider::state": _text("provider.state"),
    "MedicalProvider::zip": _text("provider.zip_code"),
    "MedicalProvider::phone": _text("provider.phone"),
    "MedicalProvider::fax": _text("provider.fax"),
    "MedicalProvider::requestMethod": _text("provider.request_method", ""),
    "medical_provider_list": _text("derived.medical_provider_list", ""),
    "medical_bills_table": _text("derived.medical_bills_table", ""),
    # Medical financials
    "total_billed": _money("totals.total_billed"),
    "insurance_paid": _money("totals.total_insurance_paid"),
    "insurance_adjusted": _money("totals.total_insurance_adjusted"),
    "mp_paid": _money("totals.total_medpay_paid"),
    "patient_paid": _money("totals.total_patient_paid"),
    "reduction_amount": _money("totals.total_reduction"),
    "expense": _money("totals.total_expense"),
    "$total_due": _money("totals.total_balance_due"),
    "mileage_total": _money("totals.mileage_total"),
    "total_billed_formatted": _currency("totals.total_billed"),
    "insurance_paid_formatted": _currency("totals.total_insurance_paid"),
    "insurance_adjusted_formatted": _currency("totals.total_insurance_adjusted"),
    "total_due_formatted": _currency("totals.total_balance_due"),
    "mileage_total_formatted": _currency("totals.mileage_total"),
    # Damages
    **{f"general_damages_{name}": _money(f"damages.{name}") for name, _ in GENERAL_DAMAGE_CATEGORIES},
    "general_damages_table": _text("derived.general_damages_table", ""),
    "general_damages_total": _money("damages.general_damages_total"),
    "special_damages_total": _money("damages.special_damages_total"),
    "total_damages": _money("damages.total_damages"),
    "general_damages_total_formatted": _currency("damages.general_damages_total"),
    "special_damages_total_formatted": _currency("damages.special_damages_total"),
    "total_damages_formatted": _currency("damages.total_damages"),
    # Settlement (derived figures recomputed from the settlement inputs)
    "settlement_amount": _money("split.gross_settlement"),
    "settlement_amount_formatted": _currency("split.gross_settlement"),
    "attorney_fee": _money("split.attorney_fee"),
    "attorney_fee_formatted": _currency("split.attorney_fee"),
    "attorney_fee_percentage": _money("split.attorney_fee_percentage"),
    "Attorney Fee Percentage": PayloadField("split.attorney_fee_percentage", "N/A", format_percentage),
    "case_expenses": _money("split.case_expenses"),
    "case_expenses_formatted": _currency("split.case_expenses"),
    "medical_liens": _money("split.medical_liens"),
    "medical_liens_formatted": _currency("split.medical_liens"),
    "client_net": _money("split.client_net"),
    "client_net_formatted": _currency("split.client_net"),
    "settlement_date": _date("settlement.settlement_date", ""),
    "settlement_status": _text("settlement.status"),
    # Statute of limitations; blank when the date of loss is unknown.
    "statute_date_2_years": _date("statute.deadline", ""),
    "county_name": _text("case.wreck_county", ""),
    "recipient_email": _text("derived.recipient_email", ""),
}

# alias -> canonical key in PAYLOAD_FIELDS
ALIASES: dict[str, str] = {
    "fullDate": "current_date",
    "requestDate": "current_date",
    "$$fullDate": "current_date",
    "$$requestDate": "current_date",
    "client.fullName": "Client::fullName",
    "client_full_name": "Client::fullName",
    "client.dob": "Client::dateOfBirth",
    "client_dob": "Client::dateOfBirth",
    "client.list": "client_list",
    "Client::list": "client_list",
    "defendant.full_name": "Defendant::fullName",
    "defendant_full_name": "Defendant::fullName",
    "FirstParty::carrier": "ClientsAutoInsurer::name",
    "FirstParty::claimNumber": "ClientsClaim::claimNumber",
    "FirstParty::adjuster": "ClientsAdjuster::fullName",
    "FirstParty::adjusterPhone": "ClientsAdjuster::phone",
    "FirstParty::adjusterEmail": "ClientsAdjuster::email",
    "FirstParty::adjusterFax": "ClientsAdjuster::fax",
    "Clients_AutoInsurer::name": "ClientsAutoInsurer::name",
    "Clients_Claim::claimNumber": "ClientsClaim::claimNumber",
    "Clients_Adjuster::fullName": "ClientsAdjuster::fullName",
    "Clients_Adjuster::phone": "ClientsAdjuster::phone",
    "Clients_Adjuster::email": "ClientsAdjuster::email",
    "Clients_Adjuster::fax": "ClientsAdjuster::fax",
    "ThirdParty::carrier": "DefendantsAutoInsurer::name",
    "ThirdParty::claimNumber": "DefendantsClaim::claimNumber",
    "ThirdParty::adjuster": "DefendantsAdjuster::fullName",
    "ThirdParty::adjusterPhone": "DefendantsAdjuster::phone",
    "ThirdParty::adjusterEmail": "DefendantsAdjuster::email",
    "ThirdParty::adjusterFax": "DefendantsAdjuster::fax",
    "Defendants_AutoInsurer::name": "DefendantsAutoInsurer::name",
    "Defendants_Claim::claimNumber": "DefendantsClaim::claimNumber",
    "Defendants_Adjuster::fullName": "DefendantsAdjuster::fullName",
    "Defendants_Adjuster::phone": "DefendantsAdjuster::phone",
    "Defendants_Adjuster::email": "DefendantsAdjuster::email",
    "Defendants_Adjuster::fax": "DefendantsAdjuster::fax",
    "third_party_claim.auto_insurance.name": "third_party_claim_auto_insurance_name",
    "third_party_claim.claim_number": "third_party_claim_claim_number",
    "health_claim.health_insurance.name": "health_insurance_name",
    "health_claim.member_id": "health_claim_member_id",
    "health_claim.health_adjuster.email": "health_adjuster_email",
    "medical_provider.name": "MedicalProvider::name",
    "medical_provider_name": "MedicalProvider::name",
    "medical_provider_street_address": "MedicalProvider::streetAddress",
    "medical_provider_city": "MedicalProvider::city",
    "medical_provider_state": "MedicalProvider::state",
    "medical_provider_zip_code": "MedicalProvider::zip",
    "medical_provider.list": "medical_provider_list",
    "total_medical_bills": "total_billed",
    "medical_total": "total_billed",
    "mileage_amount": "mileage_total",
    "Mileage": "mileage_total",
    **{label: f"general_damages_{name}" for name, label in GENERAL_DAMAGE_CATEGORIES},
    "total_general_damages": "general_damages_total",
    "Total amount of general damages": "general_damages_total",
    "total_special_damages": "special_damages_total",
    "Total amount of specials": "special_damages_total",
    "TOTAL DAMAGES": "total_damages",
    "gross_settlement": "settlement_amount",
    "settlement_offer_amount": "settlement_amount",
    "gross_settlement_formatted": "settlement_amount_formatted",
    "Attorney Fee": "attorney_fee_formatted",
    "Case Expenses": "case_expenses_formatted",
    "Medical Liens": "medical_liens_formatted",
    "client_net_amount": "client_net",
    "client_net_amount_formatted": "client_net_formatted",
    "Client Net": "client_net_formatted",
    "Client Net Amount": "client_net_formatted",
    "Settlement Date": "settlement_date",
    "Settlement Status": "settlement_status",
    "statute_of_limitations_date": "statute_date_2_years",
    "statute_date_two_years": "statute_date_2_years",
    "statute_of_limitations_date_2_years": "statute_date_2_years",
    "statute_of_limitations_2_years": "statute_date_2_years",
    "accident_date_plus_2_years": "statute_date_2_years",
    "date_2_years_after_accident": "statute_date_2_years",
    "2_years_after_accident": "statute_date_2_years",
    "Statute Date (2 Years)": "statute_date_2_years",
    "Statute Deadline (Auto)": "statute_date_2_years",
}


def _is_blank(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def _lookup(ctx: dict[str, Any], path: str) -> Any:
    head, *rest = path.split(".")
    obj = ctx.get(head)
    for part in rest:
        if obj is None:
            return None
        obj = record_value(obj, part)
    return obj


def resolve_field(ctx: dict[str, Any], spec: PayloadField) -> Any:
    for path in spec.sources:
        value = _lookup(ctx, path)
        if _is_blank(value):
            continue
        out = spec.formatter(value) if spec.formatter else value
        if not _is_blank(out):
            return out
    return spec.default


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def _provider_name(provider: Any) -> str:
    return (record_value(provider, "name") or "").strip() or "Unknown"


def _unique_providers(bills: Sequence[Any]) -> list[Any]:
    seen: set[Any] = set()
    out: list[Any] = []
    for bill in bills:
        provider = record_value(bill, "medical_provider")
        if provider is None:
            continue
        key = record_value(provider, "id") or id(provider)
        if key in seen:
            continue
        seen.add(key)
        out.append(provider)
    return out


def _derived(inputs: PayloadInputs, figures: CaseFigures, provider: Any, template_type: str) -> dict[str, str]:
    names = [getattr(c, "short_name", "") for c in inputs.clients]
    bills_table = "\n".join(
        f"{_provider_name(record_value(b, 'medical_provider'))}\t{format_currency(record_value(b, 'amount_billed') or 0)}"
        for b in inputs.medical_bills
    )
    damages_table = "\n".join(
        f"{label}\t{format_currency(getattr(figures.damages, name))}" for name, label in GENERAL_DAMAGE_CATEGORIES
    )
    return {
        "client_list": ", ".join(n for n in names if n and n != "N/A"),
        "medical_provider_list": "\n".join(_provider_name(p) for p in _unique_providers(inputs.medical_bills)),
        "medical_bills_table": bills_table,
        "general_damages_table": damages_table,
        "recipient_email": recipient_email(
            template_type,
            first_party_claim=inputs.first_party_claim,
            third_party_claim=inputs.third_party_claim,
            health_claim=inputs.health_claim,
            medical_provider=provider,
            selected_party=inputs.selected_party,
        ),
    }


def prepare_document_payload(
    template_type: str,
    inputs: PayloadInputs,
    *,
    firm: FirmInfo,
    today: dt.date | None = None,
    figures: CaseFigures | None = None,
) -> dict[str, Any]:
    """
    Flat placeholder -> value map for the rendering workflow.

    Pure: the same inputs (and the same `today`) always give the same map.
    Values are str, int or float; never None.
    """
    today = today or dt.date.today()
    figures = figures or compute_case_figures(inputs)

    bills = list(inputs.medical_bills)
    if inputs.provider_id is not None:
        bills = [b for b in bills if record_value(b, "medical_provider_id") == inputs.provider_id]
    provider_bill = bills[0] if bills else None
    provider = record_value(provider_bill, "medical_provider")

    case_id = record_value(inputs.casefile, "id") or 0
    ctx: dict[str, Any] = {
        "meta": {
            "template_type": template_type,
            "case_id": case_id,
            "case_number": f"Case #{case_id}",
            "today": today,
            "current_day": str(today.day),
            "current_month": f"{today:%B}",
            "current_year": str(today.year),
        },
        "firm": firm,
        "case": inputs.casefile,
        "client": inputs.client,
        "defendant": inputs.defendant,
        "first_party": inputs.first_party_claim,
        "third_party": inputs.third_party_claim,
        "health": inputs.health_claim,
        "provider": provider,
        "provider_bill": provider_bill,
        "totals": figures.totals,
        "damages": figures.damages,
        "split": figures.split,
        "settlement": inputs.settlement,
        "statute": {"deadline": figures.statute_deadline},
        "derived": _derived(inputs, figures, provider, template_type),
    }

    payload = {key: resolve_field(ctx, spec) for key, spec in PAYLOAD_FIELDS.items()}
    for alias, canonical in ALIASES.items():
        payload[alias] = payload[canonical]

    logger.debug("prepared payload for %s: %d fields", template_type, len(payload))
    return payload


def document_name(
    mode: GenerationMode,
    *,
    document_type_name: str,
    case_id: int,
    clients: Sequence[Any] = (),
    target_client: Any | None = None,
    provider: Any | None = None,
) -> str:
    client_name = (getattr(target_client, "short_name", "") or "Client") if target_client is not None else ""
    if mode == GenerationMode.PER_CLIENT and target_client is not None:
        return f"{document_type_name} - {client_name}"
    if mode == GenerationMode.PER_CLIENT_PROVIDER and target_client is not None:
        provider_name = (record_value(provider, "name") or "Provider") if provider is not None else "Provider"
        return f"{document_type_name} - {client_name} - {provider_name}"
    if mode == GenerationMode.ALL_CLIENTS:
        return f"{document_type_name} - {case_name(clients)}"
    return f"{document_type_name} - Case #{case_id}"


def prepare_document_payload_with_mode(
    template_type: str,
    mode: GenerationMode,
    inputs: PayloadInputs,
    *,
    firm: FirmInfo,
    today: dt.date | None = None,
    figures: CaseFigures | None = None,
    document_type_name: str | None = None,
) -> dict[str, Any]:
    """Base payload plus the mode and the instance's document name."""
    payload = prepare_document_payload(template_type, inputs, firm=firm, today=today, figures=figures)

    provider = None
    if inputs.provider_id is not None:
        provider = next(
            (
                record_value(b, "medical_provider")
                for b in inputs.medical_bills
                if record_value(b, "medical_provider_id") == inputs.provider_id
            ),
            None,
        )
    payload["generation_mode"] = mode.value
    payload["document_name"] = document_name(
        mode,
        document_type_name=document_type_name or "Document",
        case_id=payload["case_id"],
        clients=inputs.clients,
        target_client=inputs.client,
        provider=provider,
    )
    return payload
