from typing import Optional

from fastapi import APIRouter, Depends, Query

from servicedir.api.deps import get_audit_service
from servicedir.core.security import get_current_admin
from servicedir.schemas.audit import AuditLogOut
from servicedir.services.audit_service import AuditService

router = APIRouter(
    prefix="/admin/audit",
    tags=["Admin - Audit"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=list[AuditLogOut])
async def list_audit_logs(
    entity_type: Optional[str] = Query(None),
    entity_id: Optional[str] = Query(None),
    limit: int = Query(200, ge=1, le=1000),
    service: AuditService = Depends(get_audit_service),
):
    return await service.list_logs(limit, entity_type, entity_id)
