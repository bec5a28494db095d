"""Tests for the anonymous read endpoints."""

import uuid

import pytest
from django.shortcuts import reverse  # type: ignore[attr-defined]
from django.test.client import Client

from accounts.models import EwmUser
from conftest import FakeViewCounter
from events.models import Category, Event
from events.schema import RatingCreateSchema
from events.service import rating_service
from events.tests.conftest import EventFactory

pytestmark = pytest.mark.django_db


def test_list_events_only_published(client: Client, event: Event, published_event: Event) -> None:
    response = client.get(reverse("api:list_events"))

    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [str(published_event.pk)]


def test_list_events_records_hit(
    client: Client, view_counter: FakeViewCounter, published_event: Event
) -> None:
    client.get(reverse("api:list_events"), REMOTE_ADDR="192.0.2.10")

    assert [(path, ip) for _, path, ip, _ in view_counter.hits] == [("/events", "192.0.2.10")]


def test_list_events_filters_and_sort(client: Client, event_factory: EventFactory, category: Category) -> None:
    cheap = event_factory(state=Event.State.PUBLISHED, views=1)
    paid = event_factory(state=Event.State.PUBLISHED, paid=True, views=9)
    other = Category.objects.create(name="Sports")
    event_factory(state=Event.State.PUBLISHED, category=other)

    response = client.get(reverse("api:list_events"), {"paid": "false", "categories": [str(category.pk)]})
    assert [e["id"] for e in response.json()] == [str(cheap.pk)]

    response = client.get(reverse("api:list_events"), {"sort": "VIEWS", "categories": [str(category.pk)]})
    assert [e["id"] for e in response.json()] == [str(paid.pk), str(cheap.pk)]


def test_list_events_inverted_range(client: Client) -> None:
    response = client.get(
        reverse("api:list_events"),
        {"range_start": "2031-01-02T00:00:00Z", "range_end": "2031-01-01T00:00:00Z"},
    )
    assert response.status_code == 422


def test_get_event_counts_unique_views(client: Client, published_event: Event) -> None:
    url = reverse("api:get_event", kwargs={"event_id": published_event.pk})

    client.get(url, REMOTE_ADDR="192.0.2.10")
    client.get(url, REMOTE_ADDR="192.0.2.10")
    response = client.get(url, REMOTE_ADDR="192.0.2.11")

    assert response.status_code == 200
    data = response.json()
    assert data["views"] == 2
    assert data["state"] == Event.State.PUBLISHED
    assert data["location"] == {"lat": 55.75, "lon": 37.61}


def test_get_event_prefers_forwarded_for(
    client: Client, view_counter: FakeViewCounter, published_event: Event
) -> None:
    url = reverse("api:get_event", kwargs={"event_id": published_event.pk})
    client.get(url, HTTP_X_FORWARDED_FOR="203.0.113.5, 10.0.0.1")

    assert view_counter.hits[0][2] == "203.0.113.5"


def test_get_unpublished_event_is_not_found(client: Client, event: Event) -> None:
    response = client.get(reverse("api:get_event", kwargs={"event_id": event.pk}))

    assert response.status_code == 404
    data = response.json()
    assert data["status"] == "NOT_FOUND"
    assert data["code"] == "NOT_FOUND"
    assert str(event.pk) in data["detail"]


def test_categories(client: Client, category: Category) -> None:
    response = client.get(reverse("api:list_categories"))
    assert response.status_code == 200
    assert response.json()["results"] == [{"id": str(category.pk), "name": "Concerts"}]

    response = client.get(reverse("api:get_category", kwargs={"category_id": uuid.uuid4()}))
    assert response.status_code == 404


def test_event_ratings(client: Client, user: EwmUser, completed_event: Event) -> None:
    rating = rating_service.rate(user.pk, completed_event.pk, RatingCreateSchema(score=4))

    response = client.get(reverse("api:list_event_ratings", kwargs={"event_id": completed_event.pk}))
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["results"]] == [str(rating.pk)]
    assert response.json()["count"] == 1

    response = client.get(reverse("api:get_rating", kwargs={"rating_id": rating.pk}))
    assert response.status_code == 200
    assert response.json()["score"] == 4
    assert response.json()["user"]["id"] == str(user.pk)
