from datetime import datetime

from pydantic import BaseModel, Field


class CategoryDB(BaseModel):
    name: str
    slug: str
    icon_name: str
    deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.utcnow)
