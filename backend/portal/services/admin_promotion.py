"""Admin Promotion: set a user's role to admin by email.

Invariants:
    - Unknown email raises ResourceNotFoundError and issues no UPDATE
    - Promoting an existing admin is a no-op success
"""

import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.domain_types import UserRole
from portal.core.errors import ResourceNotFoundError
from portal.models.user import User

logger = logging.getLogger(__name__)


async def promote_to_admin(db: AsyncSession, email: str) -> User:
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()
    if user is None:
        raise ResourceNotFoundError("User", email)

    await db.execute(
        update(User).where(User.email == email).values(role=UserRole.ADMIN.value),
    )
    await db.commit()
    await db.refresh(user)
    logger.info("User promoted to admin", extra={"user_id": user.id})
    return user
