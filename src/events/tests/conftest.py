import typing as t
from datetime import datetime

import pytest
from django.utils import timezone

from accounts.models import EwmUser
from conftest import EwmUserFactory
from events.models import Category, Event


@pytest.fixture
def organizer(user_factory: EwmUserFactory) -> EwmUser:
    return user_factory(username="organizer@user.test")


@pytest.fixture
def category() -> Category:
    return Category.objects.create(name="Concerts")


class EventFactory:
    def __init__(self, initiator: EwmUser, category: Category, event_date: datetime) -> None:
        self.initiator = initiator
        self.category = category
        self.event_date = event_date

    def __call__(self, **kwargs: t.Any) -> Event:
        state = kwargs.get("state", Event.State.PENDING)
        if state in (Event.State.PUBLISHED, Event.State.COMPLETED):
            kwargs.setdefault("published_on", timezone.now())
        defaults: dict[str, t.Any] = {
            "initiator": self.initiator,
            "category": self.category,
            "title": "Jazz in the park",
            "annotation": "An evening of live jazz under the trees.",
            "description": "Bring a blanket. Four bands, two stages and a lot of good music until midnight.",
            "location_lat": 55.75,
            "location_lon": 37.61,
            "event_date": self.event_date,
            "participant_limit": 0,
            "request_moderation": True,
        }
        defaults.update(kwargs)
        return Event.objects.create(**defaults)


@pytest.fixture
def event_factory(organizer: EwmUser, category: Category, next_week: datetime) -> EventFactory:
    return EventFactory(organizer, category, next_week)


@pytest.fixture
def event(event_factory: EventFactory) -> Event:
    """A pending event awaiting moderation."""
    return event_factory()


@pytest.fixture
def published_event(event_factory: EventFactory) -> Event:
    return event_factory(state=Event.State.PUBLISHED)


@pytest.fixture
def moderated_event(event_factory: EventFactory) -> Event:
    """Published, two seats, every request needs the organizer's approval."""
    return event_factory(state=Event.State.PUBLISHED, participant_limit=2, request_moderation=True)


@pytest.fixture
def completed_event(event_factory: EventFactory) -> Event:
    return event_factory(state=Event.State.COMPLETED)
