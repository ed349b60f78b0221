from __future__ import annotations

import logging
from typing import List

from servicedir.core.errors import NotFound
from servicedir.mapper.directory_mapper import to_category_out
from servicedir.models.category import CategoryDB
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.schemas.category import CategoryCreate
from servicedir.services.audit_service import AuditService

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, categories: CategoryRepository, services: ServiceRepository, audit: AuditService):
        self.categories = categories
        self.services = services
        self.audit = audit

    async def list(self) -> List[dict]:
        counts = await self.services.count_by_category()
        return [
            to_category_out(c, services_count=counts.get(c.get("slug"), 0))
            for c in await self.categories.list()
        ]

    async def count(self) -> int:
        return await self.categories.count()

    async def create(self, payload: CategoryCreate, actor: dict) -> dict:
        if await self.categories.get_by_slug(payload.slug):
            raise ValueError("Category slug already exists")

        doc = await self.categories.create(
            CategoryDB(name=payload.name.strip(), slug=payload.slug, icon_name=payload.icon_name)
        )
        out = to_category_out(doc)
        logger.info("Category %s created by %s", out["slug"], actor.get("id"))

        await self.audit.record(
            actor,
            "category.create",
            {"type": "category", "id": out["id"]},
            f"Category created ({out['name']})",
            {"slug": out["slug"], "icon_name": out["icon_name"]},
        )
        return out

    async def delete(self, category_id: str, actor: dict) -> None:
        """
        Services pointing at the slug are left in place; they simply stop
        resolving to a category.
        """
        doc = await self.categories.get(category_id)
        if not doc:
            raise NotFound("category", category_id)

        await self.categories.delete(category_id)
        logger.info("Category %s deleted by %s", doc["slug"], actor.get("id"))

        await self.audit.record(
            actor,
            "category.delete",
            {"type": "category", "id": category_id},
            f"Category deleted ({doc['name']})",
            {"slug": doc["slug"]},
        )
