"""Root conftest: shared test configuration, async DB and seeded rows.

Invariants:
    - Every test gets a fresh in-memory SQLite database (StaticPool, one connection)
    - Seeded users: owner and stranger (role "user"), admin_user (role "admin"),
      super_admin (role "super_admin")
    - Tokens are issued through real session rows, never by patching the resolver
"""

import os
import secrets
from datetime import datetime, timedelta, timezone

# Tests never talk to the real email provider or a developer database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.pop("RESEND_API_KEY", None)

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from portal.core.domain_types import UserRole  # noqa: E402
from portal.db.base import Base  # noqa: E402
from portal.models import AuthSession, Book, User  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


# ─── Seeded rows ────────────────────────────────────────────────

async def _create_user(db, email: str, role: UserRole) -> User:
    user = User(email=email, name=email.split("@")[0], role=role.value)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
async def owner(test_db):
    return await _create_user(test_db, "owner@example.com", UserRole.STANDARD)


@pytest.fixture
async def stranger(test_db):
    return await _create_user(test_db, "stranger@example.com", UserRole.STANDARD)


@pytest.fixture
async def admin_user(test_db):
    return await _create_user(test_db, "admin@example.com", UserRole.ADMIN)


@pytest.fixture
async def super_admin(test_db):
    return await _create_user(test_db, "root@example.com", UserRole.SUPER_ADMIN)


@pytest.fixture
async def book(test_db, owner):
    book = Book(user_id=owner.id, title="The Long Way Home")
    test_db.add(book)
    await test_db.commit()
    await test_db.refresh(book)
    return book


@pytest.fixture
def issue_token(test_db):
    """Insert a session row for a user and return its token."""
    async def _issue(user: User, expires_in: timedelta = timedelta(days=7)) -> str:
        token = secrets.token_urlsafe(24)
        test_db.add(AuthSession(
            token=token,
            user_id=user.id,
            expires_at=datetime.now(timezone.utc) + expires_in,
        ))
        await test_db.commit()
        return token
    return _issue


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def owner_headers(issue_token, owner):
    return bearer(await issue_token(owner))


@pytest.fixture
async def stranger_headers(issue_token, stranger):
    return bearer(await issue_token(stranger))


@pytest.fixture
async def admin_headers(issue_token, admin_user):
    return bearer(await issue_token(admin_user))


@pytest.fixture
async def super_admin_headers(issue_token, super_admin):
    return bearer(await issue_token(super_admin))
