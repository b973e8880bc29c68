from casedesk.models.activity_log import ActivityLog
from casedesk.models.case import Case
from casedesk.models.client import Client
from casedesk.models.damages import GeneralDamages, MileageLog
from casedesk.models.defendant import Defendant
from casedesk.models.document import Document
from casedesk.models.insurance import Adjuster, FirstPartyClaim, HealthClaim, InsuranceCarrier, ThirdPartyClaim
from casedesk.models.medical import MedicalBill, MedicalProvider
from casedesk.models.settlement import Settlement

__all__ = [
    "ActivityLog",
    "Adjuster",
    "Case",
    "Client",
    "Defendant",
    "Document",
    "FirstPartyClaim",
    "GeneralDamages",
    "HealthClaim",
    "InsuranceCarrier",
    "MedicalBill",
    "MedicalProvider",
    "MileageLog",
    "Settlement",
    "ThirdPartyClaim",
]
