from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from servicedir.core.enums import ALL, QueryMode
from servicedir.models.directory import MallEvent, Shop
from servicedir.models.service import Service

T = TypeVar("T")


class CatalogQuery(BaseModel):
    """
    Filter request for the service catalog. Exactly one entry mode:
    ``category_slug`` (category mode) or ``search_all`` (search mode).
    """

    country: str = "AU"
    state: Optional[str] = None
    category_slug: Optional[str] = None
    search_all: bool = False
    tag: Optional[str] = ALL
    search_term: Optional[str] = None
    viewer_is_admin: bool = False

    model_config = {"frozen": True}


class DirectoryQuery(BaseModel):
    province: Optional[str] = ALL
    mall_id: Optional[str] = ALL
    search_term: Optional[str] = None

    model_config = {"frozen": True}


class QueryResult(BaseModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    count: int = 0
    considered: int = 0

    @property
    def is_empty(self) -> bool:
        return self.count == 0


class CatalogResult(QueryResult[Service]):
    mode: QueryMode


class ShopResult(QueryResult[Shop]):
    pass


class EventResult(QueryResult[MallEvent]):
    pass
