from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from servicedir.core.icons import ICON_NAMES
from servicedir.schemas.service import ServiceOut

# ---------- Category ----------

class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=3)
    slug: str = Field(..., min_length=3, pattern=r"^[a-z0-9-]+$")
    icon_name: str

    @field_validator("icon_name")
    @classmethod
    def known_icon(cls, v: str) -> str:
        if v not in ICON_NAMES:
            raise ValueError(f"Unknown icon ({v})")
        return v


class CategoryResponse(BaseModel):
    id: str
    name: str
    slug: str
    icon_name: str
    services_count: int = 0


class CategoryPage(BaseModel):
    category: CategoryResponse
    tags: List[str]
    location_name: Optional[str] = None
    services: List[ServiceOut]
    count: int
