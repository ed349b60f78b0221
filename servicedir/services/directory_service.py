from __future__ import annotations

from typing import List, Optional

from servicedir.core.enums import ALL
from servicedir.core.errors import NotFound
from servicedir.core.regions import location_name
from servicedir.mapper.directory_mapper import to_event, to_mall, to_shop
from servicedir.repositories.directory_repository import DirectoryRepository
from servicedir.schemas.query import DirectoryQuery, EventResult, ShopResult
from servicedir.services.catalog_query import run_event_query, run_shop_query

NEPAL = "NP"


class DirectoryService:
    def __init__(self, repo: DirectoryRepository):
        self.repo = repo

    async def list_malls(self, province: Optional[str] = None) -> List[dict]:
        province = None if province in (None, "", ALL) else province
        return [to_mall(d).model_dump() for d in await self.repo.list_malls(province)]

    async def _require_mall(self, mall_id: str):
        doc = await self.repo.get_mall(mall_id)
        if not doc:
            raise NotFound("mall", mall_id)
        return to_mall(doc)

    async def mall_page(self, mall_id: str) -> dict:
        mall = await self._require_mall(mall_id)
        q = DirectoryQuery(mall_id=mall_id)
        shops = run_shop_query([to_shop(d) for d in await self.repo.list_shops(mall_id)], q)
        events = run_event_query([to_event(d) for d in await self.repo.list_events(mall_id)], q)
        return {
            "mall": mall,
            "location_name": location_name(NEPAL, mall.province),
            "shops": shops.items,
            "events": events.items,
        }

    async def shops(self, query: DirectoryQuery) -> ShopResult:
        if query.mall_id not in (None, "", ALL):
            await self._require_mall(query.mall_id)
        docs = await self.repo.list_shops()
        return run_shop_query([to_shop(d) for d in docs], query)

    async def events(self, query: DirectoryQuery) -> EventResult:
        if query.mall_id not in (None, "", ALL):
            await self._require_mall(query.mall_id)
        docs = await self.repo.list_events()
        return run_event_query([to_event(d) for d in docs], query)
