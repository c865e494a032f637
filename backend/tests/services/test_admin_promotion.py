"""Admin Promotion: role update by email."""

import pytest
from sqlalchemy import select

from portal.core.errors import ResourceNotFoundError
from portal.models import User
from portal.services.admin_promotion import promote_to_admin


async def test_promotes_existing_user(test_db, owner):
    user = await promote_to_admin(test_db, "owner@example.com")

    assert user.role == "admin"


async def test_promoting_admin_is_noop(test_db, admin_user):
    user = await promote_to_admin(test_db, "admin@example.com")

    assert user.role == "admin"


async def test_unknown_email_raises_and_changes_nothing(test_db, owner):
    with pytest.raises(ResourceNotFoundError):
        await promote_to_admin(test_db, "nobody@example.com")

    result = await test_db.execute(select(User.role))
    assert result.scalars().all() == ["user"]
