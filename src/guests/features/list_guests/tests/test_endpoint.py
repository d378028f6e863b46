"""Tests for the admin guest listing endpoint."""

import pytest

from src.admin.config import get_admin_auth_config
from src.admin.sessions import ADMIN_COOKIE_NAME
from src.guests.dependencies import get_guest_read_model
from src.guests.tests.inmemory_models import (
    FailingGuestReadModel,
    InMemoryGuestReadModel,
    create_test_record,
    create_test_storage,
)
from src.guests.urls import GUESTS_URL


@pytest.fixture
def storage():
    return create_test_storage(
        [
            create_test_record(name="Older", email="older@example.com", minutes_ago=60),
            create_test_record(
                name="Newer",
                email="newer@example.com",
                phone="555-0100",
                adults=2,
                children=2,
                message="Can't wait",
                minutes_ago=1,
            ),
        ]
    )


@pytest.fixture
def overrides(storage, admin_config):
    return {
        get_guest_read_model: lambda: InMemoryGuestReadModel(storage),
        get_admin_auth_config: lambda: admin_config,
    }


@pytest.mark.asyncio
async def test_list_guests_with_cookie(client_factory, overrides, admin_config):
    async with client_factory(overrides) as client:
        client.cookies.set(ADMIN_COOKIE_NAME, admin_config.token)
        response = await client.get(GUESTS_URL)

    assert response.status_code == 200
    data = response.json()
    assert [guest["name"] for guest in data] == ["Newer", "Older"]
    newer = data[0]
    assert newer["email"] == "newer@example.com"
    assert newer["phone"] == "555-0100"
    assert newer["adults"] == 2
    assert newer["children"] == 2
    assert newer["message"] == "Can't wait"
    assert newer["createdAt"].startswith("2026-10-01T18:29")
    assert "id" in newer


@pytest.mark.asyncio
async def test_list_guests_with_bearer_token(client_factory, overrides, admin_config):
    async with client_factory(overrides) as client:
        response = await client.get(
            GUESTS_URL, headers={"Authorization": f"Bearer {admin_config.token}"}
        )

    assert response.status_code == 200
    assert len(response.json()) == 2


@pytest.mark.asyncio
async def test_list_guests_without_session(client_factory, overrides, storage):
    async with client_factory(overrides) as client:
        response = await client.get(GUESTS_URL)

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}
    assert storage.list_calls == 0


@pytest.mark.asyncio
async def test_list_guests_with_wrong_token(client_factory, overrides, storage):
    async with client_factory(overrides) as client:
        client.cookies.set(ADMIN_COOKIE_NAME, "s3cret-admin-tokeN")
        response = await client.get(GUESTS_URL)

    assert response.status_code == 401
    assert storage.list_calls == 0


@pytest.mark.asyncio
async def test_list_guests_store_failure(client_factory, admin_config):
    overrides = {
        get_guest_read_model: lambda: FailingGuestReadModel(),
        get_admin_auth_config: lambda: admin_config,
    }

    async with client_factory(overrides) as client:
        client.cookies.set(ADMIN_COOKIE_NAME, admin_config.token)
        response = await client.get(GUESTS_URL)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch guests"}
