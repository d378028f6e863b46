import pytest


@pytest.mark.asyncio
async def test_health_check(client_factory):
    """Test the health check endpoint returns ok status."""
    async with client_factory() as client:
        response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_health_check_sets_security_headers(client_factory):
    async with client_factory() as client:
        response = await client.get("/health")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "SAMEORIGIN"
    assert response.headers["referrer-policy"] == "no-referrer"


@pytest.mark.asyncio
async def test_root_endpoint(client_factory):
    """Test the root endpoint returns welcome message."""
    async with client_factory() as client:
        response = await client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Welcome to the Anniversary RSVP API"
