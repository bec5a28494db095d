"""Tests for the pure authorization and validation guards."""

import typing as t
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from events.exceptions import (
    EventNotCompletedError,
    EventNotOpenError,
    IllegalStateForEditError,
    NotFoundError,
    SchedulingConstraintViolationError,
    SelfParticipationDeniedError,
    SelfRatingDeniedError,
)
from events.models import Event, ParticipationRequest, Rating
from events.service import guards

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def initiator_id() -> uuid.UUID:
    return uuid.uuid4()


def _event(initiator_id: uuid.UUID, **kwargs: object) -> Event:
    return Event(initiator_id=initiator_id, **kwargs)


def test_initiator_checks(initiator_id: uuid.UUID) -> None:
    event = _event(initiator_id)
    other = uuid.uuid4()

    assert guards.is_initiator(initiator_id, event)
    assert not guards.is_initiator(other, event)
    guards.ensure_initiator(initiator_id, event)
    with pytest.raises(NotFoundError):
        guards.ensure_initiator(other, event)
    with pytest.raises(SelfParticipationDeniedError):
        guards.ensure_not_initiator_for_participation(initiator_id, event)
    with pytest.raises(SelfRatingDeniedError):
        guards.ensure_not_initiator_for_rating(initiator_id, event)
    guards.ensure_not_initiator_for_participation(other, event)
    guards.ensure_not_initiator_for_rating(other, event)


def test_requester_and_rater_checks() -> None:
    owner = uuid.uuid4()
    request = ParticipationRequest(requester_id=owner)
    rating = Rating(user_id=owner)

    guards.ensure_requester(owner, request)
    guards.ensure_rater(owner, rating)
    with pytest.raises(NotFoundError):
        guards.ensure_requester(uuid.uuid4(), request)
    with pytest.raises(NotFoundError):
        guards.ensure_rater(uuid.uuid4(), rating)


def test_state_checks(initiator_id: uuid.UUID) -> None:
    guards.ensure_published(_event(initiator_id, state=Event.State.PUBLISHED))
    guards.ensure_completed(_event(initiator_id, state=Event.State.COMPLETED))
    with pytest.raises(EventNotOpenError):
        guards.ensure_published(_event(initiator_id, state=Event.State.PENDING))
    with pytest.raises(EventNotCompletedError):
        guards.ensure_completed(_event(initiator_id, state=Event.State.PUBLISHED))


@pytest.mark.parametrize("state", [Event.State.PENDING, Event.State.CANCELED])
def test_editable_states(initiator_id: uuid.UUID, state: str) -> None:
    guards.ensure_editable_by_initiator(_event(initiator_id, state=state))


@pytest.mark.parametrize("state", [Event.State.PUBLISHED, Event.State.COMPLETED])
def test_frozen_states(initiator_id: uuid.UUID, state: str) -> None:
    with pytest.raises(IllegalStateForEditError):
        guards.ensure_editable_by_initiator(_event(initiator_id, state=state))


def test_event_date_before_publication() -> None:
    guards.ensure_event_date(NOW + timedelta(hours=2), NOW)
    with pytest.raises(SchedulingConstraintViolationError):
        guards.ensure_event_date(NOW + timedelta(hours=1, minutes=59), NOW)


def test_event_date_after_publication() -> None:
    published_on = NOW - timedelta(minutes=30)
    guards.ensure_event_date(published_on + timedelta(hours=1), NOW, published_on)
    with pytest.raises(SchedulingConstraintViolationError):
        guards.ensure_event_date(published_on + timedelta(minutes=59), NOW, published_on)


def test_lead_times_are_configurable(settings: t.Any) -> None:
    settings.EVENT_MIN_LEAD_TIME = timedelta(hours=5)
    with pytest.raises(SchedulingConstraintViolationError):
        guards.ensure_event_date(NOW + timedelta(hours=4), NOW)


def test_seat_predicates(initiator_id: uuid.UUID) -> None:
    unlimited = _event(initiator_id, participant_limit=0, confirmed_requests=50, request_moderation=True)
    full = _event(initiator_id, participant_limit=2, confirmed_requests=2, request_moderation=True)
    open_unmoderated = _event(initiator_id, participant_limit=2, confirmed_requests=1, request_moderation=False)

    assert guards.has_free_seat(unlimited)
    assert not guards.has_free_seat(full)
    assert guards.has_free_seat(open_unmoderated)
    assert not guards.requires_manual_confirmation(unlimited)
    assert guards.requires_manual_confirmation(full)
    assert not guards.requires_manual_confirmation(open_unmoderated)
