from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException

from servicedir.api.deps import get_inquiry_service
from servicedir.core.errors import NotFound
from servicedir.schemas.inquiry import ReportCreate, ReportOut, SubmissionOut
from servicedir.services.inquiry_service import InquiryService

router = APIRouter(tags=["Contributions"])


@router.post("/services/{service_id}/reports", response_model=ReportOut, status_code=201)
async def file_report(
    service_id: str,
    payload: ReportCreate,
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    try:
        return await inquiries.file_report(service_id, payload)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


# raw body: the variant is picked by submission_type and every violation
# is reported together (ValidationFailure -> 422)
@router.post("/submissions", response_model=SubmissionOut, status_code=201)
async def submit(
    payload: Dict[str, Any] = Body(...),
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    return await inquiries.submit(payload)
