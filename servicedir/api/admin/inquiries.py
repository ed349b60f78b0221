from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from servicedir.api.deps import get_inquiry_service
from servicedir.core.errors import NotFound
from servicedir.core.security import Viewer, get_current_admin
from servicedir.schemas.inquiry import ReportGroup, ReportOut, SubmissionOut
from servicedir.services.inquiry_service import InquiryService

router = APIRouter(
    prefix="/admin",
    tags=["Admin - Inquiries"],
    dependencies=[Depends(get_current_admin)],
)


# ========================
# SUBMISSIONS
# ========================
@router.get("/submissions", response_model=list[SubmissionOut])
async def list_submissions(
    status: Optional[str] = Query("pending", pattern="^(pending|resolved)$"),
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    return await inquiries.list_submissions(status)


@router.post("/submissions/{submission_id}/resolve", response_model=SubmissionOut)
async def resolve_submission(
    submission_id: str,
    admin: Viewer = Depends(get_current_admin),
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    try:
        return await inquiries.resolve_submission(submission_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Submission not found") from exc


@router.delete("/submissions/{submission_id}")
async def delete_submission(
    submission_id: str,
    admin: Viewer = Depends(get_current_admin),
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    try:
        await inquiries.delete_submission(submission_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Submission not found") from exc
    return {"success": True}


# ========================
# REPORTS
# ========================
@router.get("/reports", response_model=list[ReportGroup])
async def pending_reports(inquiries: InquiryService = Depends(get_inquiry_service)):
    return await inquiries.pending_reports_by_service()


@router.post("/reports/{report_id}/resolve", response_model=ReportOut)
async def resolve_report(
    report_id: str,
    admin: Viewer = Depends(get_current_admin),
    inquiries: InquiryService = Depends(get_inquiry_service),
):
    try:
        return await inquiries.resolve_report(report_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Report not found") from exc
