import typing as t

import httpx
import pytest
from django.test import override_settings
from pytest import MonkeyPatch

from conftest import FakeViewCounter
from events.models import Event
from events.service import view_service

pytestmark = pytest.mark.django_db


def test_track_read_records_hit_and_refreshes_views(view_counter: FakeViewCounter, published_event: Event) -> None:
    path = view_service.event_path(published_event.pk)

    with override_settings(STATS_APP_NAME="ewm-test"):
        view_service.track_read([published_event], path, "10.0.0.1")
    view_service.track_read([published_event], path, "10.0.0.1")
    view_service.track_read([published_event], path, "10.0.0.2")

    published_event.refresh_from_db()
    assert [(app, p, ip) for app, p, ip, _ in view_counter.hits][0] == ("ewm-test", path, "10.0.0.1")
    assert len(view_counter.hits) == 3
    assert published_event.views == 2


def test_views_are_overwritten_not_incremented(view_counter: FakeViewCounter, event_factory: t.Any) -> None:
    event = event_factory(state=Event.State.PUBLISHED, views=40)
    view_counter.unique[view_service.event_path(event.pk)] = 7

    view_service.refresh_views([event])

    event.refresh_from_db()
    assert event.views == 7


def test_stats_outage_keeps_views(
    monkeypatch: MonkeyPatch, view_counter: FakeViewCounter, event_factory: t.Any
) -> None:
    event = event_factory(state=Event.State.PUBLISHED, views=5)

    def broken(*args: t.Any) -> t.NoReturn:
        raise httpx.ConnectError("stats server is down")

    monkeypatch.setattr(view_counter, "record_hit", broken)
    monkeypatch.setattr(view_counter, "unique_hits", broken)

    view_service.track_read([event], view_service.event_path(event.pk), "10.0.0.1")

    event.refresh_from_db()
    assert event.views == 5
