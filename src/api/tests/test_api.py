import typing as t

import orjson
import pytest
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.shortcuts import reverse  # type: ignore[attr-defined]
from django.test import RequestFactory
from django.test.client import Client

from api.exception_handlers import (
    INTEGRITY_REASON,
    handle_django_validation_error,
    handle_event_domain_error,
    handle_general_exception,
    handle_integrity_error,
)
from events.exceptions import CapacityExceededError, NotFoundError

pytestmark = pytest.mark.django_db


def test_healthcheck(client: Client) -> None:
    response = client.get("/api/healthcheck")
    assert response.status_code == 200


def test_version(client: Client) -> None:
    response = client.get("/api/version")
    assert response.status_code == 200
    assert response.json() == {"version": settings.VERSION}


def test_docs_are_published(client: Client) -> None:
    assert client.get("/api/docs").status_code == 200
    assert reverse("api:list_events") == "/api/events/"


@pytest.fixture
def rf_request() -> t.Any:
    return RequestFactory().get("/api/events/")


def _body(response: t.Any) -> dict[str, t.Any]:
    return orjson.loads(response.content)  # type: ignore[no-any-return]


def test_domain_error_body(rf_request: t.Any) -> None:
    response = handle_event_domain_error(rf_request, CapacityExceededError())

    assert response.status_code == 409
    body = _body(response)
    assert body["status"] == "CONFLICT"
    assert body["code"] == "CAPACITY_EXCEEDED"
    assert body["reason"]


def test_not_found_detail(rf_request: t.Any) -> None:
    response = handle_event_domain_error(rf_request, NotFoundError("Event with id=1 was not found"))

    assert response.status_code == 404
    assert _body(response)["detail"] == "Event with id=1 was not found"


def test_integrity_error_hides_storage_details(rf_request: t.Any) -> None:
    response = handle_integrity_error(rf_request, IntegrityError('duplicate key value violates "events_rating"'))

    body = _body(response)
    assert response.status_code == 409
    assert body["reason"] == INTEGRITY_REASON
    assert "events_rating" not in body["detail"]


def test_validation_error(rf_request: t.Any) -> None:
    response = handle_django_validation_error(rf_request, ValidationError({"title": ["Too short."]}))

    assert response.status_code == 400
    assert _body(response) == {"errors": {"title": ["Too short."]}}


def test_unexpected_error(rf_request: t.Any) -> None:
    response = handle_general_exception(rf_request, RuntimeError("boom"))

    assert response.status_code == 500
    assert _body(response)["code"] == "INTERNAL_SERVER_ERROR"
