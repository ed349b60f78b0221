from fastapi import APIRouter, Depends, HTTPException

from servicedir.api.deps import get_category_service
from servicedir.core.errors import NotFound
from servicedir.core.security import Viewer, get_current_admin
from servicedir.schemas.category import CategoryCreate, CategoryResponse
from servicedir.services.categories_service import CategoryService

router = APIRouter(
    prefix="/admin/categories",
    tags=["Admin - Categories"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(categories: CategoryService = Depends(get_category_service)):
    return await categories.list()


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    admin: Viewer = Depends(get_current_admin),
    categories: CategoryService = Depends(get_category_service),
):
    try:
        return await categories.create(data, admin.actor)
    except ValueError as exc:
        raise HTTPException(409, str(exc)) from exc


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    admin: Viewer = Depends(get_current_admin),
    categories: CategoryService = Depends(get_category_service),
):
    try:
        await categories.delete(category_id, admin.actor)
    except NotFound as exc:
        raise HTTPException(404, "Category not found") from exc
    return {"success": True}
