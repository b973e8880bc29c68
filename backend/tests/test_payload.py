import datetime as dt
from decimal import Decimal
from types import SimpleNamespace

from casedesk.models.enums import GenerationMode
from casedesk.services.payload import (
    ALIASES,
    PAYLOAD_FIELDS,
    FirmInfo,
    PayloadInputs,
    prepare_document_payload,
    prepare_document_payload_with_mode,
)

TODAY = dt.date(2025, 1, 10)
FIRM = FirmInfo(name="Reyes Law", state="OK", email="office@reyes.test")


def _client(**kw):
    base = dict(
        id=1,
        client_number=1,
        first_name="Ana",
        middle_name=None,
        last_name="Reyes",
        full_name="Ana Reyes",
        short_name="Ana Reyes",
        is_driver=True,
        state=None,
        date_of_birth=dt.date(1990, 7, 4),
        ssn="123456789",
    )
    base.update(kw)
    return SimpleNamespace(**base)


def _provider(pid, name, email=None):
    return SimpleNamespace(id=pid, name=name, email=email, street_address="1 Main St", type="Clinic")


def _inputs(**kw):
    clinic = _provider(10, "Tulsa Clinic", "records@clinic.test")
    imaging = _provider(11, "Imaging Center")
    base = dict(
        casefile=SimpleNamespace(id=7, date_of_loss=dt.date(2023, 3, 15), wreck_state=None, wreck_county="Tulsa"),
        clients=[_client(), _client(id=2, client_number=2, first_name="Ben", full_name="Ben Reyes", short_name="Ben Reyes")],
        client=_client(),
        medical_bills=[
            SimpleNamespace(medical_provider_id=10, medical_provider=clinic, amount_billed=Decimal("1200"), service_type="ER"),
            SimpleNamespace(medical_provider_id=11, medical_provider=imaging, amount_billed=Decimal("800")),
            SimpleNamespace(medical_provider_id=10, medical_provider=clinic, amount_billed=Decimal("300")),
        ],
        mileage_logs=[SimpleNamespace(total=Decimal("35.00"))],
        settlement=SimpleNamespace(
            gross_settlement=Decimal("10000"),
            attorney_fee_percentage=Decimal("33.33"),
            case_expenses=Decimal("500"),
            medical_liens=Decimal("1000"),
            attorney_fee=Decimal("1.00"),  # stale; recomputed from the inputs
            client_net=Decimal("1.00"),
            settlement_date=dt.date(2025, 1, 2),
            status=SimpleNamespace(value="Accepted"),
        ),
    )
    base.update(kw)
    return PayloadInputs(**base)


def test_payload_is_deterministic():
    inputs = _inputs()
    assert prepare_document_payload("demand_rear_end", inputs, firm=FIRM, today=TODAY) == prepare_document_payload(
        "demand_rear_end", inputs, firm=FIRM, today=TODAY
    )


def test_payload_never_contains_none():
    for inputs in (_inputs(), PayloadInputs(casefile=SimpleNamespace(id=1))):
        payload = prepare_document_payload("third_party_lor", inputs, firm=FirmInfo(), today=TODAY)
        assert all(v is not None for v in payload.values())
        assert set(PAYLOAD_FIELDS) | set(ALIASES) <= set(payload)


def test_empty_case_gets_declared_defaults():
    payload = prepare_document_payload("engagement_letter", PayloadInputs(casefile=SimpleNamespace(id=3)), firm=FIRM, today=TODAY)
    assert payload["Client::firstName"] == "N/A"
    assert payload["Client::middleName"] == ""
    assert payload["total_billed"] == 0
    assert payload["total_billed_formatted"] == "$0.00"
    assert payload["statute_date_2_years"] == ""
    assert payload["Statute Deadline (Auto)"] == ""
    assert payload["Client::state"] == "OK"
    assert payload["case_number"] == "Case #3"


def test_aliases_mirror_canonical_fields():
    payload = prepare_document_payload("demand_rear_end", _inputs(), firm=FIRM, today=TODAY)
    for alias, canonical in ALIASES.items():
        assert payload[alias] == payload[canonical]


def test_financial_and_statute_fields():
    payload = prepare_document_payload("demand_rear_end", _inputs(), firm=FIRM, today=TODAY)
    assert payload["total_billed"] == 2300.0
    assert payload["total_billed_formatted"] == "$2,300.00"
    assert payload["mileage_total"] == 35.0
    assert payload["special_damages_total"] == 2335.0
    assert payload["statute_date_2_years"] == "March 15, 2025"
    assert payload["accident_date_plus_2_years"] == "March 15, 2025"
    assert payload["current_date"] == "January 10, 2025"
    assert payload["fullDate"] == "January 10, 2025"
    assert payload["current_year"] == "2025"


def test_settlement_figures_are_recomputed():
    payload = prepare_document_payload("proposed_settlement_statement", _inputs(), firm=FIRM, today=TODAY)
    assert payload["attorney_fee"] == 3333.0
    assert payload["client_net"] == 5167.0
    assert payload["Client Net"] == "$5,167.00"
    assert payload["Attorney Fee Percentage"] == "33.33%"
    assert payload["settlement_date"] == "January 2, 2025"
    assert payload["settlement_status"] == "Accepted"


def test_derived_tables():
    payload = prepare_document_payload("demand_rear_end", _inputs(), firm=FIRM, today=TODAY)
    assert payload["client_list"] == "Ana Reyes, Ben Reyes"
    assert payload["medical_provider_list"] == "Tulsa Clinic\nImaging Center"
    assert payload["medical_bills_table"].splitlines()[0] == "Tulsa Clinic\t$1,200.00"
    assert payload["general_damages_table"].splitlines()[0] == "Emotional Distress\t$0.00"


def test_provider_fields_follow_selected_provider():
    payload = prepare_document_payload("hipaa_request", _inputs(provider_id=11), firm=FIRM, today=TODAY)
    assert payload["MedicalProvider::name"] == "Imaging Center"
    assert payload["recipient_email"] == ""

    payload = prepare_document_payload("hipaa_request", _inputs(provider_id=10), firm=FIRM, today=TODAY)
    assert payload["MedicalProvider::name"] == "Tulsa Clinic"
    assert payload["MedicalProvider::type"] == "ER"
    assert payload["recipient_email"] == "records@clinic.test"


def test_recipient_email_for_lor():
    first = SimpleNamespace(adjuster=SimpleNamespace(email="fay@sooner.test", full_name="Fay First"), carrier=None)
    payload = prepare_document_payload("first_party_lor", _inputs(first_party_claim=first), firm=FIRM, today=TODAY)
    assert payload["recipient_email"] == "fay@sooner.test"
    assert payload["ClientsAdjuster::fullName"] == "Fay First"
    assert payload["adjuster_full_name"] == "Fay First"


def test_mode_adds_document_name():
    inputs = _inputs()
    p = prepare_document_payload_with_mode(
        "first_party_lor", GenerationMode.PER_CLIENT, inputs, firm=FIRM, today=TODAY, document_type_name="1st Party LOR"
    )
    assert p["generation_mode"] == "per_client"
    assert p["document_name"] == "1st Party LOR - Ana Reyes"

    p = prepare_document_payload_with_mode(
        "offer_acceptance", GenerationMode.CASE_LEVEL, inputs, firm=FIRM, today=TODAY, document_type_name="Offer Acceptance"
    )
    assert p["document_name"] == "Offer Acceptance - Case #7"

    p = prepare_document_payload_with_mode(
        "third_party_lor", GenerationMode.ALL_CLIENTS, inputs, firm=FIRM, today=TODAY, document_type_name="3rd Party LOR"
    )
    assert p["document_name"] == "3rd Party LOR - Ana Reyes"

    p = prepare_document_payload_with_mode(
        "hipaa_request",
        GenerationMode.PER_CLIENT_PROVIDER,
        _inputs(provider_id=11),
        firm=FIRM,
        today=TODAY,
        document_type_name="HIPAA Records Request",
    )
    assert p["document_name"] == "HIPAA Records Request - Ana Reyes - Imaging Center"
