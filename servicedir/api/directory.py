from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from servicedir.api.deps import get_directory_service
from servicedir.core.enums import ALL
from servicedir.core.errors import NotFound
from servicedir.models.directory import Mall
from servicedir.schemas.directory import MallPage
from servicedir.schemas.query import DirectoryQuery, EventResult, ShopResult
from servicedir.services.directory_service import DirectoryService

router = APIRouter(tags=["Malls"])


@router.get("/malls", response_model=list[Mall])
async def list_malls(
    province: Optional[str] = Query(None),
    directory: DirectoryService = Depends(get_directory_service),
):
    return await directory.list_malls(province)


@router.get("/malls/{mall_id}", response_model=MallPage)
async def mall_page(mall_id: str, directory: DirectoryService = Depends(get_directory_service)):
    try:
        return await directory.mall_page(mall_id)
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/shops", response_model=ShopResult)
async def find_shops(
    province: str = Query(ALL),
    mall: str = Query(ALL),
    q: Optional[str] = Query(None),
    directory: DirectoryService = Depends(get_directory_service),
):
    try:
        return await directory.shops(DirectoryQuery(province=province, mall_id=mall, search_term=q))
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.get("/events", response_model=EventResult)
async def find_events(
    province: str = Query(ALL),
    mall: str = Query(ALL),
    q: Optional[str] = Query(None),
    directory: DirectoryService = Depends(get_directory_service),
):
    try:
        return await directory.events(DirectoryQuery(province=province, mall_id=mall, search_term=q))
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
