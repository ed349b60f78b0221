# servicedir/core/security.py
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, status

from servicedir.core.enums import UserRole


@dataclass(frozen=True)
class Viewer:
    user_id: Optional[str]
    is_admin: bool

    @property
    def actor(self) -> dict:
        return {
            "role": UserRole.admin.value if self.is_admin else UserRole.visitor.value,
            "id": self.user_id or "anonymous",
        }


def get_viewer(request: Request) -> Viewer:
    """
    Identity comes from the upstream identity provider, which the
    gateway forwards as X-User-Id / X-Role headers.
    """
    user_id = (request.headers.get("X-User-Id") or "").strip() or None
    role = (request.headers.get("X-Role") or "").strip().lower()
    return Viewer(user_id=user_id, is_admin=role == UserRole.admin.value)


def get_current_admin(viewer: Viewer = Depends(get_viewer)) -> Viewer:
    if not viewer.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin privileges required"
        )
    return viewer
