import contextlib
import time
from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.admin.config import AdminAuthConfig
from src.main import app
from src.rate_limit import FixedWindowRateLimiter, get_rate_limiter

ADMIN_PASSWORD = "correct-horse-battery"
ADMIN_TOKEN = "s3cret-admin-token"


@pytest.fixture
def india_local_time():
    """Run the test with the server clock in a zone five and a half hours ahead of UTC."""
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("TZ", "Asia/Kolkata")
        time.tzset()
        yield
    time.tzset()


@pytest.fixture
def admin_config() -> AdminAuthConfig:
    """Admin secrets used by the HTTP tests."""
    return AdminAuthConfig(password=ADMIN_PASSWORD, token=ADMIN_TOKEN)


@pytest.fixture
def client_factory():
    """
    Build an HTTP client against the app with dependency overrides.

    Each client gets its own rate limiter so tests never share counters.
    """

    @contextlib.asynccontextmanager
    async def _client_factory(
        overrides: dict[Callable, Callable[[], Any]] | None = None,
    ) -> AsyncIterator[AsyncClient]:
        limiter = FixedWindowRateLimiter()
        app.dependency_overrides[get_rate_limiter] = lambda: limiter
        app.dependency_overrides.update(overrides or {})

        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                yield client
        finally:
            app.dependency_overrides.clear()

    return _client_factory
