from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from servicedir.core.enums import ServiceStatus, ServiceType
from servicedir.core.errors import NotFound, ValidationFailure
from servicedir.core.regions import is_valid_location
from servicedir.mapper.directory_mapper import to_service, to_service_out
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.schemas.service import ServiceWrite
from servicedir.services.audit_service import AuditService
from servicedir.utils.diff import changed_fields, tag_changes

logger = logging.getLogger(__name__)


class ServiceAdmin:
    def __init__(self, services: ServiceRepository, categories: CategoryRepository, audit: AuditService):
        self.services = services
        self.categories = categories
        self.audit = audit

    async def _check(self, payload: ServiceWrite) -> None:
        violations = []
        if not is_valid_location(payload.country, payload.state):
            field = "state" if payload.state and is_valid_location(payload.country) else "country"
            violations.append((field, "Unknown location"))
        if not await self.categories.get_by_slug(payload.category_slug):
            violations.append(("category_slug", f"Unknown category ({payload.category_slug})"))
        if violations:
            raise ValidationFailure(violations)

    def _doc(self, payload: ServiceWrite) -> Dict[str, Any]:
        steps = payload.steps_list()
        return {
            "title": payload.title.strip(),
            "link": str(payload.link),
            "category_slug": payload.category_slug,
            "description": payload.description.strip(),
            "steps": steps,
            "country": payload.country,
            "state": payload.state,
            "verified": payload.verified,
            "tags": payload.tags,
            "phone": payload.phone,
            "email": payload.email,
            "address": payload.address,
            "service_type": (ServiceType.guide if steps else ServiceType.info).value,
        }

    async def _require(self, service_id: str) -> dict:
        doc = await self.services.get(service_id)
        if not doc:
            raise NotFound("service", service_id)
        return doc

    async def list(self, country: Optional[str] = None, category_slug: Optional[str] = None) -> dict:
        docs = await self.services.list_all(country)
        items = [to_service_out(d) for d in docs]

        counts: Dict[str, int] = {}
        for s in items:
            counts[s["category_slug"]] = counts.get(s["category_slug"], 0) + 1

        if category_slug:
            items = [s for s in items if s["category_slug"] == category_slug]
        return {"items": items, "count": len(items), "category_counts": counts}

    async def count(self) -> int:
        return await self.services.count()

    async def get(self, service_id: str) -> dict:
        return to_service_out(await self._require(service_id))

    async def create(self, payload: ServiceWrite, actor: dict) -> dict:
        await self._check(payload)
        data = self._doc(payload)
        data["status"] = ServiceStatus.published.value

        doc = await self.services.create(data)
        out = to_service_out(doc)
        logger.info("Service %s created by %s", out["id"], actor.get("id"))

        await self.audit.record(
            actor, "service.create", {"type": "service", "id": out["id"]},
            f"Service created ({out['title']})",
            {"category_slug": out["category_slug"], "country": out["country"], "state": out["state"]},
        )
        return out

    async def update(self, service_id: str, payload: ServiceWrite, actor: dict) -> dict:
        before = await self._require(service_id)
        await self._check(payload)
        data = self._doc(payload)
        meta = {
            "fields": changed_fields(before, data),
            "tags": tag_changes(before.get("tags"), data.get("tags")),
        }

        doc = await self.services.update(service_id, data)
        out = to_service_out(doc)

        await self.audit.record(
            actor, "service.update", {"type": "service", "id": service_id},
            f"Service updated ({out['title']})", meta,
        )
        return out

    async def toggle_status(self, service_id: str, actor: dict) -> dict:
        current = to_service(await self._require(service_id))
        new_status = (
            ServiceStatus.disabled
            if current.status == ServiceStatus.published
            else ServiceStatus.published
        )
        doc = await self.services.update(service_id, {"status": new_status.value})
        logger.info("Service %s is now %s", service_id, new_status.value)

        await self.audit.record(
            actor, "service.status", {"type": "service", "id": service_id},
            f"Service {new_status.value} ({current.title})",
            {"from": current.status.value, "to": new_status.value},
        )
        return to_service_out(doc)

    async def delete(self, service_id: str, actor: dict) -> None:
        doc = await self._require(service_id)
        await self.services.delete(service_id)
        logger.info("Service %s deleted by %s", service_id, actor.get("id"))

        await self.audit.record(
            actor, "service.delete", {"type": "service", "id": service_id},
            f"Service deleted ({doc.get('title')})",
        )
