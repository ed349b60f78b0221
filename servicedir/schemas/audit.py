from datetime import datetime
from typing import Any, Dict, Literal

from pydantic import BaseModel, Field

from servicedir.core.enums import UserRole


class AuditActor(BaseModel):
    role: UserRole
    id: str


class AuditEntity(BaseModel):
    type: Literal["service", "category", "report", "submission"]
    # ObjectId string, or "batch" for bulk imports
    id: str


class AuditLogOut(BaseModel):
    id: str
    time: datetime
    type: str
    actor: AuditActor
    entity: AuditEntity
    message: str
    meta: Dict[str, Any] = Field(default_factory=dict)
