"""API test fixtures: FastAPI test client over the shared in-memory DB.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine (readiness check uses it)
    - Dependency overrides cleared after every test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from portal.infrastructure.database import get_db, DatabaseSessionManager
from portal.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # The lifespan does not run under ASGITransport
    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager
