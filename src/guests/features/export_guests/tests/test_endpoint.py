"""Tests for the admin CSV export endpoint."""

import csv
import io
import re
from datetime import UTC, datetime

import pytest

from src.admin.config import get_admin_auth_config
from src.admin.sessions import ADMIN_COOKIE_NAME
from src.guests.dependencies import get_guest_read_model
from src.guests.features.export_guests.router import export_filename
from src.guests.reports import CSV_HEADERS
from src.guests.tests.inmemory_models import (
    FailingGuestReadModel,
    InMemoryGuestReadModel,
    create_test_record,
    create_test_storage,
)
from src.guests.urls import EXPORT_GUESTS_URL


@pytest.fixture
def storage():
    return create_test_storage(
        [
            create_test_record(name="Older", email="older@example.com", minutes_ago=60),
            create_test_record(
                name="Newer",
                email="newer@example.com",
                adults=2,
                children=1,
                message='Hello, "friends"',
                minutes_ago=1,
            ),
        ]
    )


@pytest.mark.asyncio
async def test_export_csv(client_factory, storage, admin_config):
    overrides = {
        get_guest_read_model: lambda: InMemoryGuestReadModel(storage),
        get_admin_auth_config: lambda: admin_config,
    }

    async with client_factory(overrides) as client:
        client.cookies.set(ADMIN_COOKIE_NAME, admin_config.token)
        response = await client.get(EXPORT_GUESTS_URL)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert re.fullmatch(
        r'attachment; filename="anniversary-guests-\d{4}-\d{2}-\d{2}\.csv"',
        response.headers["content-disposition"],
    )

    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0] == CSV_HEADERS
    assert [row[0] for row in rows[1:]] == ["Newer", "Older"]
    assert rows[1][3:6] == ["2", "1", "3"]
    assert rows[1][6] == 'Hello, "friends"'


@pytest.mark.asyncio
async def test_export_without_session_has_no_csv(client_factory, storage, admin_config):
    overrides = {
        get_guest_read_model: lambda: InMemoryGuestReadModel(storage),
        get_admin_auth_config: lambda: admin_config,
    }

    async with client_factory(overrides) as client:
        response = await client.get(EXPORT_GUESTS_URL)

    assert response.status_code == 401
    assert response.headers["content-type"].startswith("application/json")
    assert "content-disposition" not in response.headers
    assert response.json() == {"error": "Unauthorized"}
    assert storage.list_calls == 0


@pytest.mark.asyncio
async def test_export_store_failure_is_json(client_factory, admin_config):
    overrides = {
        get_guest_read_model: lambda: FailingGuestReadModel(),
        get_admin_auth_config: lambda: admin_config,
    }

    async with client_factory(overrides) as client:
        client.cookies.set(ADMIN_COOKIE_NAME, admin_config.token)
        response = await client.get(EXPORT_GUESTS_URL)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Failed to export guests"}


def test_export_filename_uses_iso_date():
    assert export_filename(datetime(2026, 10, 19, 23, 59, tzinfo=UTC)) == (
        "anniversary-guests-2026-10-19.csv"
    )
