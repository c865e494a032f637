"""Session Resolver: turn an incoming request into an Identity or None.

Invariants:
    - Bearer header wins over the session cookie
    - Signed cookie values ("token.signature") contribute only the token part
    - Unknown, expired or orphaned sessions resolve to None, never raise
    - One query per request; no cross-request cache
"""

import logging
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.domain_types import Identity, UserId, UserRole
from portal.models.auth_session import AuthSession

logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


def extract_session_token(request: Request, cookie_name: str) -> str | None:
    """Pull the raw session token from the Authorization header or cookie."""
    authorization = request.headers.get("authorization", "")
    if authorization.lower().startswith(_BEARER_PREFIX):
        token = authorization[len(_BEARER_PREFIX):].strip()
        if token:
            return token

    cookie = request.cookies.get(cookie_name)
    if not cookie:
        return None
    token = cookie.split(".", 1)[0].strip()
    return token or None


def _as_utc(value: datetime) -> datetime:
    # sqlite hands back naive datetimes; everything is stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_role(raw: str) -> UserRole:
    try:
        return UserRole(raw)
    except ValueError:
        logger.warning(f"Unknown role {raw!r}, treating as standard user")
        return UserRole.STANDARD


async def resolve_session(
    request: Request, db: AsyncSession, cookie_name: str,
) -> Identity | None:
    """Resolve the request's session to an Identity."""
    token = extract_session_token(request, cookie_name)
    if token is None:
        return None

    result = await db.execute(
        select(AuthSession).where(AuthSession.token == token),
    )
    session = result.scalar_one_or_none()
    if session is None:
        return None
    if _as_utc(session.expires_at) <= datetime.now(timezone.utc):
        logger.info("Expired session presented", extra={"user_id": session.user_id})
        return None
    if session.user is None:
        return None

    return Identity(id=UserId(session.user.id), role=_parse_role(session.user.role))
