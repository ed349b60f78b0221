from datetime import datetime
from typing import Optional

from servicedir.repositories.audit_repository import AuditRepository


class AuditService:
    def __init__(self, repo: AuditRepository):
        self.repo = repo

    async def list_logs(self, limit: int = 200, entity_type: Optional[str] = None, entity_id: Optional[str] = None):
        return await self.repo.list(limit, entity_type, entity_id)

    async def record(self, actor: dict, type_: str, entity: dict, message: str, meta: Optional[dict] = None):
        """Append one admin action; ``type_`` is "<entity>.<verb>", e.g. "service.update"."""
        await self.repo.create({
            "time": datetime.utcnow(),
            "type": type_,
            "actor": actor,
            "entity": entity,
            "message": message,
            "meta": meta or {},
        })
