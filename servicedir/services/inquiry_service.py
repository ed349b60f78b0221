from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from servicedir.core.enums import InquiryStatus, SubmissionType
from servicedir.core.errors import NotFound
from servicedir.mapper.directory_mapper import oid_str, to_inquiry_out, to_service
from servicedir.repositories.directory_repository import DirectoryRepository
from servicedir.repositories.inquiry_repository import InquiryRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.schemas.inquiry import ReportCreate
from servicedir.services.audit_service import AuditService
from servicedir.services.catalog_query import visible_to
from servicedir.services.submission_validation import validate_submission

logger = logging.getLogger(__name__)


class InquiryService:
    """Public reports / submissions and their admin review."""

    def __init__(
        self,
        reports: InquiryRepository,
        submissions: InquiryRepository,
        services: ServiceRepository,
        directory: DirectoryRepository,
        audit: AuditService,
    ):
        self.reports = reports
        self.submissions = submissions
        self.services = services
        self.directory = directory
        self.audit = audit

    # -------------------------
    # Reports
    # -------------------------
    async def file_report(self, service_id: str, payload: ReportCreate) -> dict:
        doc = await self.services.get(service_id)
        if not doc or not visible_to(False)(to_service(doc)):
            raise NotFound("service", service_id)

        report = await self.reports.create({
            "service_id": oid_str(doc["_id"]),
            "service_title": doc.get("title", ""),
            "reporter_email": str(payload.reporter_email).lower(),
            "reason": payload.reason.strip(),
            "country": doc.get("country"),
            "state": doc.get("state"),
        })
        logger.info("Report filed against service %s", service_id)
        return to_inquiry_out(report)

    async def pending_reports_by_service(self) -> List[dict]:
        groups: Dict[str, dict] = {}
        for r in await self.reports.list(InquiryStatus.pending.value):
            out = to_inquiry_out(r)
            g = groups.setdefault(out["service_id"], {
                "service_id": out["service_id"],
                "service_title": out.get("service_title", ""),
                "reports": [],
            })
            g["reports"].append(out)
        return list(groups.values())

    async def resolve_report(self, report_id: str, actor: dict) -> dict:
        doc = await self.reports.resolve(report_id)
        if not doc:
            raise NotFound("report", report_id)
        await self.audit.record(
            actor, "report.resolve", {"type": "report", "id": report_id},
            f"Report resolved ({doc.get('service_title', '')})",
        )
        return to_inquiry_out(doc)

    # -------------------------
    # Submissions
    # -------------------------
    async def submit(self, payload: Dict[str, Any]) -> dict:
        mall_ids = set(await self.directory.mall_ids())
        submission = validate_submission(payload, mall_ids)

        data = submission.model_dump(mode="json", exclude_none=True)
        kind = data["submission_type"]
        if kind == SubmissionType.shop.value:
            data["title"] = data["shop_name"]
        elif kind == SubmissionType.event.value:
            data["title"] = data["event_name"]

        doc = await self.submissions.create(data)
        logger.info("New %s submission %s", kind, doc["_id"])
        return to_inquiry_out(doc)

    async def list_submissions(self, status: Optional[str] = None) -> List[dict]:
        return [to_inquiry_out(d) for d in await self.submissions.list(status)]

    async def resolve_submission(self, submission_id: str, actor: dict) -> dict:
        doc = await self.submissions.resolve(submission_id)
        if not doc:
            raise NotFound("submission", submission_id)
        await self.audit.record(
            actor, "submission.resolve", {"type": "submission", "id": submission_id},
            f"Submission resolved ({doc.get('title', '')})",
        )
        return to_inquiry_out(doc)

    async def delete_submission(self, submission_id: str, actor: dict) -> None:
        if not await self.submissions.delete(submission_id):
            raise NotFound("submission", submission_id)
        await self.audit.record(
            actor, "submission.delete", {"type": "submission", "id": submission_id},
            "Submission deleted",
        )

    async def pending_counts(self) -> Dict[str, int]:
        return {
            "submissions": await self.submissions.count(InquiryStatus.pending.value),
            "reports": await self.reports.count(InquiryStatus.pending.value),
        }
