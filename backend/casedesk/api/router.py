from fastapi import APIRouter

from casedesk.api.routes import activity, cases, damages, documents, insurance, medical, parties, settlements

api_router = APIRouter()

api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(parties.router, prefix="/cases/{case_id}", tags=["parties"])
api_router.include_router(medical.case_router, prefix="/cases/{case_id}/medical-bills", tags=["medical"])
api_router.include_router(medical.router, prefix="/medical-providers", tags=["medical"])
api_router.include_router(damages.router, prefix="/cases/{case_id}", tags=["damages"])
api_router.include_router(settlements.case_router, prefix="/cases/{case_id}/settlement", tags=["settlement"])
api_router.include_router(settlements.router, prefix="/settlements", tags=["settlement"])
api_router.include_router(insurance.router, tags=["insurance"])
api_router.include_router(documents.router, prefix="/cases/{case_id}/documents", tags=["documents"])
api_router.include_router(activity.router, prefix="/cases/{case_id}/activity", tags=["activity"])
