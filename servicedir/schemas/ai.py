from typing import List, Optional

from pydantic import AnyHttpUrl, BaseModel, Field


class SummarizeRequest(BaseModel):
    url: AnyHttpUrl
    category_slug: Optional[str] = None


class LinkSummary(BaseModel):
    title: str
    description: str
    steps: List[str] = Field(default_factory=list)
    suggested_tags: List[str] = Field(default_factory=list)
