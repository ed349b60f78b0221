from __future__ import annotations

from typing import Any, Dict, List, Optional


class DirectoryRepository:
    """Malls, and the shops and events that live inside them."""

    def __init__(self, malls, shops, events):
        self.malls = malls
        self.shops = shops
        self.events = events

    async def list_malls(self, province: Optional[str] = None) -> List[Dict[str, Any]]:
        filt = {"province": province} if province else {}
        return [d async for d in self.malls.find(filt).sort("name", 1)]

    async def get_mall(self, mall_id: str) -> Optional[Dict[str, Any]]:
        return await self.malls.find_one({"_id": mall_id})

    async def mall_ids(self) -> List[str]:
        return [d["_id"] async for d in self.malls.find({}, {"_id": 1})]

    async def list_shops(self, mall_id: Optional[str] = None) -> List[Dict[str, Any]]:
        filt = {"mall_id": mall_id} if mall_id else {}
        return [d async for d in self.shops.find(filt)]

    async def list_events(self, mall_id: Optional[str] = None) -> List[Dict[str, Any]]:
        filt = {"mall_id": mall_id} if mall_id else {}
        return [d async for d in self.events.find(filt)]

    async def upsert(self, col_name: str, doc: Dict[str, Any]) -> None:
        col = getattr(self, col_name)
        await col.update_one({"_id": doc["_id"]}, {"$set": doc}, upsert=True)
