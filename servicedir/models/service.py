from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from servicedir.core.enums import ServiceStatus, ServiceType
from servicedir.models.common import SDBaseModel


class Service(SDBaseModel):
    id: str
    title: str
    description: str = ""
    steps: List[str] = Field(default_factory=list)
    link: str
    category_slug: str
    tags: Optional[List[str]] = None
    country: str
    state: Optional[str] = None
    status: ServiceStatus = ServiceStatus.published
    verified: bool = False
    service_type: ServiceType = ServiceType.info
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    icon_data_uri: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_unscoped(self) -> bool:
        return not self.state
