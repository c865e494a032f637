"""Auth Dependencies: resolve the caller once per request and gate routes.

Invariants:
    - get_identity never raises for anonymous callers
    - require_identity: no identity -> 401
    - require_admin: anything but an admin identity -> 403 (anonymous included)
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from portal.config import Settings, get_settings
from portal.core.authorization import is_admin
from portal.core.domain_types import Identity
from portal.core.errors import ErrorContext, ForbiddenError, UnauthenticatedError
from portal.infrastructure.database import get_db
from portal.services.session_resolver import resolve_session


async def get_identity(
    request: Request,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> Identity | None:
    return await resolve_session(request, db, settings.session_cookie_name)


async def require_identity(
    identity: Identity | None = Depends(get_identity),
) -> Identity:
    if identity is None:
        raise UnauthenticatedError()
    return identity


async def require_admin(
    identity: Identity | None = Depends(get_identity),
) -> Identity:
    if not is_admin(identity):
        raise ForbiddenError(
            context=ErrorContext(user_id=identity.id if identity else None),
        )
    return identity
