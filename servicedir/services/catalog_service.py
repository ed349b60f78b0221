"""
Data-access adapter around the catalog query engine: fetch a snapshot
from the store, hand it to the pure filter, shape the page.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from servicedir.core.category_tags import CategoryTags, tags_for
from servicedir.core.enums import ALL
from servicedir.core.errors import NotFound
from servicedir.core.regions import location_name
from servicedir.mapper.directory_mapper import to_category_out, to_service
from servicedir.repositories.category_repository import CategoryRepository
from servicedir.repositories.service_repository import ServiceRepository
from servicedir.schemas.query import CatalogQuery, CatalogResult
from servicedir.services.catalog_query import in_location, run_catalog_query, visible_to

logger = logging.getLogger(__name__)

# (label, category, tag, country, state)
POPULAR_SEARCHES = [
    ("Student Visas in Australia", "visas-and-immigration", "Student visas", "AU", None),
    ("Tax File Number (TFN)", "money-and-taxes", "Personal taxation", "AU", None),
    ("Study Abroad from Nepal", "education-and-training", "Study abroad consultancies", "NP", "BAGMATI"),
    ("Driving Licenses in Victoria", "driving-and-transport", "Driver licensing", "AU", "VIC"),
    ("Community Organizations in Nepal", "nepal-specific", "NGOs & nonprofits", "NP", None),
]


class CatalogService:
    def __init__(self, services: ServiceRepository, categories: CategoryRepository, vocabulary: CategoryTags):
        self.services = services
        self.categories = categories
        self.vocabulary = vocabulary

    async def _require_category(self, slug: str) -> dict:
        doc = await self.categories.get_by_slug(slug)
        if not doc:
            raise NotFound("category", slug)
        return doc

    async def query(self, query: CatalogQuery) -> CatalogResult:
        if query.category_slug:
            await self._require_category(query.category_slug)
            # state stays out of the store filter; the engine partitions
            docs = await self.services.snapshot(
                category_slug=query.category_slug,
                country=query.country,
                published_only=not query.viewer_is_admin,
            )
        else:
            docs = await self.services.snapshot(
                published_only=not query.viewer_is_admin,
            )
        result = run_catalog_query([to_service(d) for d in docs], query)
        logger.debug(
            "catalog query mode=%s considered=%d matched=%d",
            result.mode.value, result.considered, result.count,
        )
        return result

    async def search(
        self,
        term: Optional[str],
        country: Optional[str] = None,
        state: Optional[str] = None,
        viewer_is_admin: bool = False,
    ) -> CatalogResult:
        """
        Catalog-wide free text. Country/state given by the caller narrow
        the store fetch only; the engine itself does not filter location
        in this mode.
        """
        docs = await self.services.snapshot(
            country=country,
            state=state,
            published_only=not viewer_is_admin,
        )
        q = CatalogQuery(
            search_all=True,
            search_term=term,
            viewer_is_admin=viewer_is_admin,
            **({"country": country} if country else {}),
        )
        return run_catalog_query([to_service(d) for d in docs], q)

    async def category_page(self, query: CatalogQuery) -> dict:
        doc = await self._require_category(query.category_slug)
        result = await self.query(query)
        return {
            "category": to_category_out(doc, services_count=result.count),
            "tags": tags_for(self.vocabulary, query.category_slug),
            "location_name": location_name(query.country, query.state),
            "services": [s.model_dump() for s in result.items],
            "count": result.count,
        }

    async def list_categories(self, country: str, state: Optional[str], viewer_is_admin: bool = False) -> List[dict]:
        """Categories by name with the number of services visible for the location."""
        docs = await self.services.snapshot(country=country, published_only=not viewer_is_admin)
        visible = visible_to(viewer_is_admin)
        located = in_location(country, state)

        counts: Dict[str, int] = {}
        for s in map(to_service, docs):
            if visible(s) and located(s):
                counts[s.category_slug] = counts.get(s.category_slug, 0) + 1

        return [
            to_category_out(c, services_count=counts.get(c.get("slug"), 0))
            for c in await self.categories.list()
        ]

    def category_tags(self, slug: str) -> List[str]:
        return tags_for(self.vocabulary, slug)

    async def get_public_service(self, service_id: str, viewer_is_admin: bool = False) -> dict:
        doc = await self.services.get(service_id)
        if not doc:
            raise NotFound("service", service_id)
        service = to_service(doc)
        if not visible_to(viewer_is_admin)(service):
            raise NotFound("service", service_id)
        return service.model_dump()

    async def popular_searches(self) -> List[dict]:
        out = []
        for label, slug, tag, country, state in POPULAR_SEARCHES:
            docs = await self.services.snapshot(category_slug=slug, country=country)
            q = CatalogQuery(category_slug=slug, tag=tag or ALL, country=country, state=state)
            result = run_catalog_query([to_service(d) for d in docs], q)
            out.append({
                "text": label,
                "category_slug": slug,
                "tag": tag,
                "country": country,
                "state": state,
                "count": result.count,
            })
        return out
