from typing import Any, Dict, List, Optional


class AuditRepository:
    def __init__(self, collection):
        self.collection = collection

    async def list(
        self,
        limit: int = 200,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        filt: Dict[str, Any] = {}
        if entity_type:
            filt["entity.type"] = entity_type
        if entity_id:
            filt["entity.id"] = entity_id

        cur = self.collection.find(filt).sort("time", -1).limit(limit)
        out = []
        async for doc in cur:
            doc["id"] = str(doc.pop("_id"))
            out.append(doc)
        return out

    async def create(self, event: Dict[str, Any]) -> None:
        await self.collection.insert_one(event)
