"""Project-wide fixtures."""

import secrets
import string
import typing as t
from datetime import datetime, time, timedelta

import faker
import pytest
from django.core.cache import cache
from django.utils import timezone
from pytest import MonkeyPatch

from accounts.models import EwmUser


class FakeViewCounter:
    """In-memory stand-in for the stats server."""

    def __init__(self) -> None:
        self.hits: list[tuple[str, str, str, datetime]] = []
        self.unique: dict[str, int] = {}

    def record_hit(self, app: str, path: str, ip: str, timestamp: datetime) -> None:
        self.hits.append((app, path, ip, timestamp))

    def unique_hits(self, path: str, start: datetime, end: datetime) -> int:
        if path in self.unique:
            return self.unique[path]
        return len({ip for _, p, ip, _ in self.hits if p == path})


@pytest.fixture(autouse=True)
def view_counter(monkeypatch: MonkeyPatch) -> FakeViewCounter:
    """Keep every test away from the real stats server."""
    counter = FakeViewCounter()
    monkeypatch.setattr("events.service.view_service.get_view_counter", lambda: counter)
    return counter


@pytest.fixture(autouse=True)
def clear_cache() -> None:
    """Throttle history lives in the cache; start each test with a clean slate."""
    cache.clear()


class EwmUserFactory:
    """Factory for creating EwmUser instances for testing."""

    fake = faker.Faker()

    def create_user(self, **kwargs: t.Any) -> EwmUser:
        username = kwargs.pop(
            "username", "".join(secrets.choice(string.ascii_lowercase) for _ in range(8)) + "@user.test"
        )
        email = kwargs.pop("email", username if "@" in username else username + "@test.com")
        password = kwargs.pop("password", "password")
        first_name = kwargs.pop("first_name", self.fake.first_name())
        last_name = kwargs.pop("last_name", self.fake.last_name())
        return EwmUser.objects.create_user(
            username=username,
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            **kwargs,
        )

    def __call__(self, **kwargs: t.Any) -> EwmUser:
        return self.create_user(**kwargs)


@pytest.fixture
def user_factory() -> EwmUserFactory:
    return EwmUserFactory()


@pytest.fixture
def user(user_factory: EwmUserFactory) -> EwmUser:
    return user_factory(username="participant@user.test")


@pytest.fixture
def superuser(user_factory: EwmUserFactory) -> EwmUser:
    """A superuser."""
    return user_factory(is_superuser=True, is_staff=True)


@pytest.fixture
def next_week() -> datetime:
    today = timezone.now()
    same_time_next_week = today + timedelta(days=7)
    noon = time(hour=12, minute=0)
    return timezone.make_aware(
        datetime.combine(same_time_next_week.date(), noon),
        timezone.get_current_timezone(),
    )
