from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import AnyHttpUrl, BaseModel, EmailStr, Field, field_validator

from servicedir.core.enums import ServiceStatus, ServiceType


def split_steps(text: str) -> List[str]:
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


# ---------- Input ----------

class ServiceWrite(BaseModel):
    title: str = Field(..., min_length=5)
    link: AnyHttpUrl
    category_slug: str = Field(..., min_length=1)
    description: str = Field(..., min_length=10)
    # newline separated, as typed into the admin form
    steps: str = Field(..., min_length=10)
    country: str = Field(..., min_length=2)
    state: Optional[str] = None
    verified: bool = False
    tags: Optional[List[str]] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None

    @field_validator("state")
    @classmethod
    def empty_state_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    def steps_list(self) -> List[str]:
        return split_steps(self.steps)


# ---------- Output ----------

class ServiceOut(BaseModel):
    id: str
    title: str
    description: str
    steps: List[str] = []
    link: str
    category_slug: str
    tags: Optional[List[str]] = None
    country: str
    state: Optional[str] = None
    status: ServiceStatus
    verified: bool = False
    service_type: ServiceType
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    icon_data_uri: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ServiceListOut(BaseModel):
    items: List[ServiceOut]
    count: int
    category_counts: Dict[str, int] = {}
