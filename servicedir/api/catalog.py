from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from servicedir.api.deps import get_catalog_service
from servicedir.core.config import Settings, get_settings
from servicedir.core.enums import ALL
from servicedir.core.errors import NotFound
from servicedir.core.regions import COUNTRIES
from servicedir.core.security import Viewer, get_viewer
from servicedir.schemas.category import CategoryPage, CategoryResponse
from servicedir.schemas.query import CatalogQuery
from servicedir.schemas.service import ServiceOut
from servicedir.services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"])


@router.get("/regions")
async def list_regions():
    return [c.model_dump() for c in COUNTRIES]


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    country: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    viewer: Viewer = Depends(get_viewer),
    settings: Settings = Depends(get_settings),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return await catalog.list_categories(
        country or settings.default_country, state or None, viewer.is_admin
    )


@router.get("/categories/{slug}", response_model=CategoryPage)
async def category_page(
    slug: str,
    country: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    tag: str = Query(ALL),
    q: Optional[str] = Query(None),
    viewer: Viewer = Depends(get_viewer),
    settings: Settings = Depends(get_settings),
    catalog: CatalogService = Depends(get_catalog_service),
):
    query = CatalogQuery(
        country=country or settings.default_country,
        state=state or None,
        category_slug=slug,
        tag=tag,
        search_term=q,
        viewer_is_admin=viewer.is_admin,
    )
    try:
        return await catalog.category_page(query)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/categories/{slug}/tags", response_model=list[str])
async def category_tags(slug: str, catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.category_tags(slug)


@router.get("/search")
async def search(
    q: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    viewer: Viewer = Depends(get_viewer),
    catalog: CatalogService = Depends(get_catalog_service),
):
    result = await catalog.search(q, country or None, state or None, viewer.is_admin)
    return {
        "query": q or "",
        "items": [s.model_dump() for s in result.items],
        "count": result.count,
    }


@router.get("/services/{service_id}", response_model=ServiceOut)
async def get_service(
    service_id: str,
    viewer: Viewer = Depends(get_viewer),
    catalog: CatalogService = Depends(get_catalog_service),
):
    try:
        return await catalog.get_public_service(service_id, viewer.is_admin)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/popular-searches")
async def popular_searches(catalog: CatalogService = Depends(get_catalog_service)):
    return await catalog.popular_searches()
