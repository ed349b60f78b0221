from fastapi import APIRouter, Depends

from servicedir.api.deps import get_category_service, get_inquiry_service, get_service_admin
from servicedir.core.security import get_current_admin

router = APIRouter(
    prefix="/admin/dashboard",
    tags=["Admin - Dashboard"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("")
async def dashboard(
    services=Depends(get_service_admin),
    categories=Depends(get_category_service),
    inquiries=Depends(get_inquiry_service),
):
    pending = await inquiries.pending_counts()
    return {
        "services": await services.count(),
        "categories": await categories.count(),
        "pending_submissions": pending["submissions"],
        "pending_reports": pending["reports"],
    }
