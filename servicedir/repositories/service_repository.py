from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo.errors import BulkWriteError

from servicedir.core.enums import ServiceStatus
from servicedir.core.errors import UpstreamFailure
from servicedir.models.common import parse_oid


class ServiceRepository:
    def __init__(self, col):
        self.col = col

    def _alive(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        filt: Dict[str, Any] = {"deleted": {"$ne": True}}
        if extra:
            filt.update(extra)
        return filt

    async def snapshot(
        self,
        category_slug: str | None = None,
        country: str | None = None,
        state: str | None = None,
        published_only: bool = True,
    ) -> List[Dict[str, Any]]:
        """
        Equality-filtered fetch, in store (insertion) order. Final
        filtering is left to the query engine.
        """
        extra: Dict[str, Any] = {}
        if category_slug:
            extra["category_slug"] = category_slug
        if country:
            extra["country"] = country
        if state:
            extra["state"] = state
        if published_only:
            extra["status"] = {"$ne": ServiceStatus.disabled.value}
        return [d async for d in self.col.find(self._alive(extra))]

    async def list_all(self, country: str | None = None) -> List[Dict[str, Any]]:
        extra = {"country": country} if country else None
        cur = self.col.find(self._alive(extra)).sort("title", 1)
        return [d async for d in cur]

    async def get(self, service_id: str) -> Optional[Dict[str, Any]]:
        oid = parse_oid(service_id)
        if oid is None:
            return None
        return await self.col.find_one(self._alive({"_id": oid}))

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        now = datetime.utcnow()
        data.update({"deleted": False, "created_at": now, "updated_at": now})
        r = await self.col.insert_one(data)
        return await self.get(str(r.inserted_id))

    async def create_many(self, docs: List[Dict[str, Any]]) -> List[str]:
        """
        All or nothing: every document carries the batch id, and a failed
        insert removes whatever part of the batch was already written.
        """
        if not docs:
            return []
        now = datetime.utcnow()
        batch = ObjectId()
        for d in docs:
            d.update({"deleted": False, "created_at": now, "updated_at": now, "import_batch": batch})
        try:
            r = await self.col.insert_many(docs, ordered=True)
        except BulkWriteError as exc:
            await self.col.delete_many({"import_batch": batch})
            written = exc.details.get("nInserted", 0)
            raise UpstreamFailure("store", f"batch rolled back after {written} of {len(docs)} inserts") from exc
        return [str(i) for i in r.inserted_ids]

    async def update(self, service_id: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data["updated_at"] = datetime.utcnow()
        await self.col.update_one(
            self._alive({"_id": parse_oid(service_id)}),
            {"$set": data},
        )
        return await self.get(service_id)

    async def delete(self, service_id: str) -> bool:
        r = await self.col.update_one(
            self._alive({"_id": parse_oid(service_id)}),
            {"$set": {"deleted": True, "updated_at": datetime.utcnow()}},
        )
        return r.modified_count == 1

    async def count(self) -> int:
        return await self.col.count_documents(self._alive())

    async def count_by_category(self, country: str | None = None) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for d in await self.list_all(country):
            slug = d.get("category_slug")
            counts[slug] = counts.get(slug, 0) + 1
        return counts
