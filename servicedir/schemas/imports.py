from typing import Dict, List, Literal, Optional

from pydantic import AnyHttpUrl, BaseModel, Field

from servicedir.schemas.ai import LinkSummary

RowStatus = Literal["pending", "success", "error"]


class CsvRow(BaseModel):
    link: AnyHttpUrl
    category_slug: str = Field(..., min_length=1)


class ImportRow(BaseModel):
    line: int
    data: Dict[str, str]
    status: RowStatus
    error: Optional[str] = None
    summary: Optional[LinkSummary] = None
    service_id: Optional[str] = None


class ImportReport(BaseModel):
    rows: List[ImportRow]
    imported: int = 0
    failed: int = 0
