from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from servicedir.core.enums import InquiryStatus
from servicedir.models.common import parse_oid


class InquiryRepository:
    """
    Shared access for the two public inquiry collections (reports and
    submissions). ``time_field`` is the creation timestamp used for
    newest-first listings.
    """

    def __init__(self, col, time_field: str):
        self.col = col
        self.time_field = time_field

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data.update({
            "status": InquiryStatus.pending.value,
            self.time_field: datetime.utcnow(),
        })
        r = await self.col.insert_one(data)
        data["_id"] = r.inserted_id
        return data

    async def list(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        filt = {"status": status} if status else {}
        cur = self.col.find(filt).sort(self.time_field, -1)
        return [d async for d in cur]

    async def get(self, inquiry_id: str) -> Optional[Dict[str, Any]]:
        oid = parse_oid(inquiry_id)
        if oid is None:
            return None
        return await self.col.find_one({"_id": oid})

    async def resolve(self, inquiry_id: str) -> Optional[Dict[str, Any]]:
        oid = parse_oid(inquiry_id)
        if oid is None:
            return None
        await self.col.update_one(
            {"_id": oid},
            {"$set": {"status": InquiryStatus.resolved.value, "resolved_at": datetime.utcnow()}},
        )
        return await self.get(inquiry_id)

    async def delete(self, inquiry_id: str) -> bool:
        oid = parse_oid(inquiry_id)
        if oid is None:
            return False
        r = await self.col.delete_one({"_id": oid})
        return r.deleted_count == 1

    async def count(self, status: Optional[str] = None) -> int:
        return await self.col.count_documents({"status": status} if status else {})
