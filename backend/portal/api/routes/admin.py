"""Admin Check: tells the web client whether to show admin navigation."""

from fastapi import APIRouter, Depends

from portal.api.dependencies import get_identity
from portal.core.authorization import is_admin
from portal.core.domain_types import Identity
from portal.schemas.auth import AdminCheckResponse

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.get("/check", response_model=AdminCheckResponse)
async def check_admin(identity: Identity | None = Depends(get_identity)):
    return AdminCheckResponse(is_admin=is_admin(identity))
