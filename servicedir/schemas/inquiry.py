from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from servicedir.core.enums import InquiryStatus, SubmissionType

# ---------- Reports ----------

class ReportCreate(BaseModel):
    reporter_email: EmailStr
    reason: str = Field(..., min_length=10)


class ReportOut(BaseModel):
    id: str
    service_id: str
    service_title: str
    reporter_email: str
    reason: str
    status: InquiryStatus
    country: Optional[str] = None
    state: Optional[str] = None
    reported_at: datetime
    resolved_at: Optional[datetime] = None


class ReportGroup(BaseModel):
    service_id: str
    service_title: str
    reports: List[ReportOut]


# ---------- Submissions ----------

class SubmissionOut(BaseModel):
    id: str
    submission_type: SubmissionType
    title: str
    status: InquiryStatus
    name: str
    email: str
    phone: Optional[str] = None
    notes: str
    url: Optional[str] = None
    category_slug: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    mall_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    submitted_at: datetime
    resolved_at: Optional[datetime] = None
