"""init

Revision ID: 0001_init
Revises: 
Create Date: 2026-10-18

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None

ENUMS = (
    ("casestage", "INTAKE", "PROCESSING", "DEMAND", "CLOSED"),
    ("settlementstatus", "PENDING", "NEGOTIATING", "ACCEPTED", "PAID", "CLOSED"),
    ("requestmethod", "EMAIL", "FAX", "MAIL"),
    ("documentcategory", "LETTERS", "MEDICAL", "INSURANCE", "SETTLEMENT", "OTHER"),
)


def _money(name: str) -> sa.Column:
    return sa.Column(name, sa.Numeric(14, 2), nullable=True)


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False)


def _claim_links() -> tuple[sa.Column, sa.Column]:
    return (
        sa.Column("carrier_id", sa.Integer(), sa.ForeignKey("insurance_carriers.id"), nullable=True),
        sa.Column("adjuster_id", sa.Integer(), sa.ForeignKey("adjusters.id", ondelete="SET NULL"), nullable=True),
    )


def upgrade() -> None:
    # ENUMs: create only if not exists (safe for re-run after partial deploy)
    for name, *values in ENUMS:
        vals = ", ".join(f"'{v}'" for v in values)
        op.execute(
            f"DO $$ BEGIN CREATE TYPE {name} AS ENUM ({vals}); "
            "EXCEPTION WHEN duplicate_object THEN NULL; END $$"
        )

    op.create_table(
        "cases",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("date_of_loss", sa.Date(), nullable=True),
        sa.Column("stage", postgresql.ENUM(name="casestage", create_type=False), nullable=False, server_default="INTAKE"),
        sa.Column("status", sa.String(length=64), nullable=False, server_default="New"),
        sa.Column("is_archived", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("time_of_wreck", sa.String(length=32), nullable=True),
        sa.Column("wreck_type", sa.String(length=64), nullable=True),
        sa.Column("wreck_street", sa.String(length=200), nullable=True),
        sa.Column("wreck_city", sa.String(length=120), nullable=True),
        sa.Column("wreck_county", sa.String(length=120), nullable=True),
        sa.Column("wreck_state", sa.String(length=32), nullable=True),
        sa.Column("police_report_number", sa.String(length=64), nullable=True),
        sa.Column("vehicle_description", sa.String(length=200), nullable=True),
        sa.Column("damage_level", sa.String(length=64), nullable=True),
        sa.Column("wreck_description", sa.Text(), nullable=True),
        sa.Column("wreck_notes", sa.Text(), nullable=True),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_cases_date_of_loss", "cases", ["date_of_loss"])
    op.create_index("ix_cases_stage", "cases", ["stage"])
    op.create_index("ix_cases_status", "cases", ["status"])
    op.create_index("ix_cases_is_archived", "cases", ["is_archived"])

    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("client_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("first_name", sa.String(length=80), nullable=False),
        sa.Column("middle_name", sa.String(length=80), nullable=True),
        sa.Column("last_name", sa.String(length=80), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("ssn", sa.String(length=16), nullable=True),
        sa.Column("marital_status", sa.String(length=32), nullable=True),
        sa.Column("is_driver", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("primary_phone", sa.String(length=32), nullable=True),
        sa.Column("secondary_phone", sa.String(length=32), nullable=True),
        sa.Column("street_address", sa.String(length=200), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("state", sa.String(length=32), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
        sa.Column("injury_description", sa.Text(), nullable=True),
        sa.Column("prior_accidents", sa.Text(), nullable=True),
        sa.Column("prior_injuries", sa.Text(), nullable=True),
        sa.Column("work_impact", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("ix_clients_case_id", "clients", ["case_id"])

    op.create_table(
        "defendants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("defendant_number", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("first_name", sa.String(length=80), nullable=False),
        sa.Column("last_name", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("phone_number", sa.String(length=32), nullable=True),
        sa.Column("liability_percentage", sa.Numeric(5, 2), nullable=False, server_default="100"),
        sa.Column("is_policyholder", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("policyholder_first_name", sa.String(length=80), nullable=True),
        sa.Column("policyholder_last_name", sa.String(length=80), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("ix_defendants_case_id", "defendants", ["case_id"])

    op.create_table(
        "insurance_carriers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("kind", sa.String(length=16), nullable=False, server_default="auto"),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("fax", sa.String(length=32), nullable=True),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("street_address", sa.String(length=200), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("state", sa.String(length=32), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
    )
    op.create_index("ix_insurance_carriers_name", "insurance_carriers", ["name"])
    op.create_index("ix_insurance_carriers_kind", "insurance_carriers", ["kind"])

    op.create_table(
        "adjusters",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "carrier_id", sa.Integer(), sa.ForeignKey("insurance_carriers.id", ondelete="SET NULL"), nullable=True
        ),
        sa.Column("first_name", sa.String(length=80), nullable=False),
        sa.Column("last_name", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("fax", sa.String(length=32), nullable=True),
        sa.Column("street_address", sa.String(length=200), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("state", sa.String(length=32), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
    )
    op.create_index("ix_adjusters_carrier_id", "adjusters", ["carrier_id"])

    op.create_table(
        "first_party_claims",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("client_id", sa.Integer(), sa.ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        *_claim_links(),
        sa.Column("policy_number", sa.String(length=64), nullable=True),
        sa.Column("claim_number", sa.String(length=64), nullable=True),
        sa.Column("policy_limits", sa.String(length=64), nullable=True),
        _money("pip_available"),
        _money("pip_used"),
        _money("med_pay_available"),
        _money("med_pay_used"),
        sa.Column("um_uim_coverage", sa.String(length=64), nullable=True),
        _money("property_damage"),
        _created_at(),
    )
    op.create_index("ix_first_party_claims_client_id", "first_party_claims", ["client_id"])

    op.create_table(
        "third_party_claims",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("defendant_id", sa.Integer(), sa.ForeignKey("defendants.id", ondelete="CASCADE"), nullable=False),
        *_claim_links(),
        sa.Column("policy_number", sa.String(length=64), nullable=True),
        sa.Column("claim_number", sa.String(length=64), nullable=True),
        sa.Column("policy_limits", sa.String(length=64), nullable=True),
        sa.Column("liability_disputed", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _money("demand_amount"),
        _money("offer_amount"),
        _money("settlement_amount"),
        sa.Column("demand_date", sa.Date(), nullable=True),
        sa.Column("offer_date", sa.Date(), nullable=True),
        sa.Column("settlement_date", sa.Date(), nullable=True),
        sa.Column("lor_sent", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("lor_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("ix_third_party_claims_defendant_id", "third_party_claims", ["defendant_id"])

    op.create_table(
        "health_claims",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("client_id", sa.Integer(), sa.ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        *_claim_links(),
        sa.Column("member_id", sa.String(length=64), nullable=True),
        sa.Column("policy_number", sa.String(length=64), nullable=True),
        sa.Column("group_number", sa.String(length=64), nullable=True),
        sa.Column("claim_number", sa.String(length=64), nullable=True),
        _money("amount_billed"),
        _money("amount_paid"),
        _created_at(),
    )
    op.create_index("ix_health_claims_client_id", "health_claims", ["client_id"])

    op.create_table(
        "medical_providers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("type", sa.String(length=80), nullable=True),
        sa.Column("street_address", sa.String(length=200), nullable=True),
        sa.Column("city", sa.String(length=120), nullable=True),
        sa.Column("state", sa.String(length=32), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("fax", sa.String(length=32), nullable=True),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column(
            "request_method", postgresql.ENUM(name="requestmethod", create_type=False), nullable=False, server_default="FAX"
        ),
        sa.Column("notes", sa.Text(), nullable=True),
    )
    op.create_index("ix_medical_providers_name", "medical_providers", ["name"])

    op.create_table(
        "medical_bills",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("client_id", sa.Integer(), sa.ForeignKey("clients.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "medical_provider_id",
            sa.Integer(),
            sa.ForeignKey("medical_providers.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("hipaa_sent", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("bill_received", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("records_received", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        _money("amount_billed"),
        _money("insurance_paid"),
        _money("insurance_adjusted"),
        _money("medpay_paid"),
        _money("patient_paid"),
        _money("reduction_amount"),
        _money("pi_expense"),
        _money("balance_due"),
        sa.Column("service_type", sa.String(length=80), nullable=True),
        sa.Column("date_of_service", sa.Date(), nullable=True),
        sa.Column("bill_number", sa.String(length=64), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("ix_medical_bills_client_id", "medical_bills", ["client_id"])
    op.create_index("ix_medical_bills_medical_provider_id", "medical_bills", ["medical_provider_id"])

    op.create_table(
        "general_damages",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        _money("emotional_distress"),
        _money("duties_under_duress"),
        _money("pain_and_suffering"),
        _money("loss_of_enjoyment"),
        _money("loss_of_consortium"),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_general_damages_case_id", "general_damages", ["case_id"], unique=True)

    op.create_table(
        "mileage_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("trip_date", sa.Date(), nullable=True),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("miles", sa.Numeric(10, 2), nullable=False),
        sa.Column("rate_per_mile", sa.Numeric(8, 4), nullable=False),
        _money("total"),
        _created_at(),
    )
    op.create_index("ix_mileage_logs_case_id", "mileage_logs", ["case_id"])

    op.create_table(
        "settlements",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("gross_settlement", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("attorney_fee_percentage", sa.Numeric(5, 2), nullable=False, server_default="33.33"),
        sa.Column("case_expenses", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("medical_liens", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("attorney_fee", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("client_net", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("settlement_date", sa.Date(), nullable=True),
        sa.Column(
            "status", postgresql.ENUM(name="settlementstatus", create_type=False), nullable=False, server_default="PENDING"
        ),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_settlements_case_id", "settlements", ["case_id"])
    op.create_index("ix_settlements_settlement_date", "settlements", ["settlement_date"])

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=False),
        sa.Column("file_name", sa.String(length=255), nullable=False),
        sa.Column("file_type", sa.String(length=100), nullable=False, server_default="application/pdf"),
        sa.Column("file_size", sa.Integer(), nullable=False),
        sa.Column("storage_path", sa.String(length=500), nullable=False),
        sa.Column("file_url", sa.String(length=1000), nullable=True),
        sa.Column(
            "category", postgresql.ENUM(name="documentcategory", create_type=False), nullable=False, server_default="LETTERS"
        ),
        sa.Column("uploaded_by", sa.String(length=200), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("ix_documents_case_id", "documents", ["case_id"])
    op.create_index("ix_documents_created_at", "documents", ["created_at"])

    op.create_table(
        "activity_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("case_id", sa.Integer(), sa.ForeignKey("cases.id", ondelete="CASCADE"), nullable=True),
        sa.Column("user_name", sa.String(200), nullable=False, server_default="Admin"),
        sa.Column("action", sa.String(64), nullable=False),
        sa.Column("entity_type", sa.String(64), nullable=False),
        sa.Column("entity_id", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("details", sa.JSON(), nullable=True),
    )
    op.create_index("ix_activity_log_created_at", "activity_log", ["created_at"])
    op.create_index("ix_activity_log_case_id", "activity_log", ["case_id"])
    op.create_index("ix_activity_log_action", "activity_log", ["action"])
    op.create_index("ix_activity_log_entity_type", "activity_log", ["entity_type"])


def downgrade() -> None:
    for table in (
        "activity_log",
        "documents",
        "settlements",
        "mileage_logs",
        "general_damages",
        "medical_bills",
        "medical_providers",
        "health_claims",
        "third_party_claims",
        "first_party_claims",
        "adjusters",
        "insurance_carriers",
        "defendants",
        "clients",
        "cases",
    ):
        op.drop_table(table)

    for name, *_ in reversed(ENUMS):
        postgresql.ENUM(name=name).drop(op.get_bind(), checkfirst=True)
