"""Tests for the fixed-window rate limiter."""

import pytest

from src.guests.dependencies import get_guest_write_model
from src.guests.tests.inmemory_models import InMemoryGuestWriteModel, create_test_storage
from src.guests.urls import GUESTS_URL
from src.rate_limit import FixedWindowRateLimiter, get_rate_limiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_within_window():
    limiter = FixedWindowRateLimiter(clock=FakeClock())

    results = [limiter.allow("login:1.2.3.4", 3, 60) for _ in range(4)]

    assert results == [True, True, True, False]


def test_window_resets_after_period():
    clock = FakeClock()
    limiter = FixedWindowRateLimiter(clock=clock)
    for _ in range(3):
        limiter.allow("login:1.2.3.4", 3, 60)

    clock.now += 59
    assert limiter.allow("login:1.2.3.4", 3, 60) is False

    clock.now += 1
    assert limiter.allow("login:1.2.3.4", 3, 60) is True


def test_keys_are_counted_separately():
    limiter = FixedWindowRateLimiter(clock=FakeClock())

    assert limiter.allow("login:1.1.1.1", 1, 60) is True
    assert limiter.allow("login:1.1.1.1", 1, 60) is False
    assert limiter.allow("login:2.2.2.2", 1, 60) is True
    assert limiter.allow("api:1.1.1.1", 1, 60) is True


def test_reset_forgets_counters():
    limiter = FixedWindowRateLimiter(clock=FakeClock())
    limiter.allow("api:1.1.1.1", 1, 60)

    limiter.reset()

    assert limiter.allow("api:1.1.1.1", 1, 60) is True


@pytest.mark.asyncio
async def test_api_routes_share_the_general_limit(client_factory):
    """After 120 requests in a minute the 121st submission is refused."""
    storage = create_test_storage()
    limiter = FixedWindowRateLimiter(clock=FakeClock())
    overrides = {
        get_guest_write_model: lambda: InMemoryGuestWriteModel(storage),
        get_rate_limiter: lambda: limiter,
    }
    for _ in range(120):
        limiter.allow("api:127.0.0.1", 120, 60)

    async with client_factory(overrides) as client:
        response = await client.post(
            GUESTS_URL, json={"name": "Asha Rao", "email": "asha@example.com"}
        )

    assert response.status_code == 429
    assert response.json() == {"error": "Too many requests"}
    assert storage.insert_calls == 0
