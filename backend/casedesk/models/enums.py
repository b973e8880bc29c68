from __future__ import annotations

import enum


class CaseStage(str, enum.Enum):
    INTAKE = "Intake"
    PROCESSING = "Processing"
    DEMAND = "Demand"
    CLOSED = "Closed"


# Valid statuses per stage, in workflow order.
CASE_STATUSES: dict[CaseStage, tuple[str, ...]] = {
    CaseStage.INTAKE: ("New", "Incomplete"),
    CaseStage.PROCESSING: ("Treating", "Awaiting B&R", "Awaiting Subro"),
    CaseStage.DEMAND: (
        "Ready for Demand",
        "Demand Sent",
        "Counter Received",
        "Counter Sent",
        "Reduction Sent",
        "Proposed Settlement Statement Sent",
        "Release Sent",
        "Payment Instructions Sent",
    ),
    CaseStage.CLOSED: ("Closed",),
}


class SettlementStatus(str, enum.Enum):
    PENDING = "Pending"
    NEGOTIATING = "Negotiating"
    ACCEPTED = "Accepted"
    PAID = "Paid"
    CLOSED = "Closed"


class GenerationMode(str, enum.Enum):
    ALL_CLIENTS = "all_clients"  # one document listing every client
    PER_CLIENT = "per_client"  # one document per selected client
    PER_CLIENT_PROVIDER = "per_client_provider"  # records requests: one per (client, provider)
    CASE_LEVEL = "case_level"


class DefaultSelection(str, enum.Enum):
    ALL = "all"
    MANUAL = "manual"
    DRIVER_ONLY = "driver_only"


class GenerationStatus(str, enum.Enum):
    PENDING = "pending"
    GENERATING = "generating"
    SUCCESS = "success"
    ERROR = "error"


class RequestMethod(str, enum.Enum):
    EMAIL = "Email"
    FAX = "Fax"
    MAIL = "Mail"


class DocumentCategory(str, enum.Enum):
    LETTERS = "Letters"
    MEDICAL = "Medical"
    INSURANCE = "Insurance"
    SETTLEMENT = "Settlement"
    OTHER = "Other"
