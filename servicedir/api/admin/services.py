from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from servicedir.api.deps import get_service_admin
from servicedir.core.errors import NotFound
from servicedir.core.security import Viewer, get_current_admin
from servicedir.schemas.service import ServiceListOut, ServiceOut, ServiceWrite
from servicedir.services.service_admin import ServiceAdmin

router = APIRouter(
    prefix="/admin/services",
    tags=["Admin - Services"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=ServiceListOut)
async def list_services(
    country: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    services: ServiceAdmin = Depends(get_service_admin),
):
    country = None if country in (None, "", "all") else country
    return await services.list(country=country, category_slug=category or None)


@router.post("", response_model=ServiceOut, status_code=201)
async def create_service(
    payload: ServiceWrite,
    admin: Viewer = Depends(get_current_admin),
    services: ServiceAdmin = Depends(get_service_admin),
):
    return await services.create(payload, admin.actor)


@router.get("/{service_id}", response_model=ServiceOut)
async def get_service(service_id: str, services: ServiceAdmin = Depends(get_service_admin)):
    try:
        return await services.get(service_id)
    except NotFound as exc:
        raise HTTPException(404, "Service not found") from exc


@router.put("/{service_id}", response_model=ServiceOut)
async def update_service(
    service_id: str,
    payload: ServiceWrite,
    admin: Viewer = Depends(get_current_admin),
    services: ServiceAdmin = Depends(get_service_admin),
):
    try:
        return await services.update(service_id, payload, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Service not found") from exc


@router.post("/{service_id}/toggle-status", response_model=ServiceOut)
async def toggle_status(
    service_id: str,
    admin: Viewer = Depends(get_current_admin),
    services: ServiceAdmin = Depends(get_service_admin),
):
    try:
        return await services.toggle_status(service_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Service not found") from exc


@router.delete("/{service_id}")
async def delete_service(
    service_id: str,
    admin: Viewer = Depends(get_current_admin),
    services: ServiceAdmin = Depends(get_service_admin),
):
    try:
        await services.delete(service_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Service not found") from exc
    return {"success": True}
