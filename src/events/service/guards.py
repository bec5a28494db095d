"""Authorization and validation guards.

Small predicates over already loaded objects, composed by the services. None of
them perform I/O; the ``ensure_*`` variants raise the matching domain error.
"""

from datetime import datetime, timedelta

from django.conf import settings

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


def is_initiator(user_id: object, event: Event) -> bool:
    return bool(event.initiator_id == user_id)


def ensure_initiator(user_id: object, event: Event) -> None:
    """Other users must not learn that the event exists."""
    if not is_initiator(user_id, event):
        raise NotFoundError(f"Event with id={event.pk} was not found")


def ensure_not_initiator_for_participation(user_id: object, event: Event) -> None:
    if is_initiator(user_id, event):
        raise SelfParticipationDeniedError()


def ensure_not_initiator_for_rating(user_id: object, event: Event) -> None:
    if is_initiator(user_id, event):
        raise SelfRatingDeniedError()


def ensure_requester(user_id: object, request: ParticipationRequest) -> None:
    if request.requester_id != user_id:
        raise NotFoundError(f"Request with id={request.pk} was not found")


def ensure_rater(user_id: object, rating: Rating) -> None:
    if rating.user_id != user_id:
        raise NotFoundError(f"Rating with id={rating.pk} was not found")


def ensure_published(event: Event) -> None:
    if event.state != Event.State.PUBLISHED:
        raise EventNotOpenError()


def ensure_completed(event: Event) -> None:
    if event.state != Event.State.COMPLETED:
        raise EventNotCompletedError()


def ensure_editable_by_initiator(event: Event) -> None:
    if event.state in (Event.State.PUBLISHED, Event.State.COMPLETED):
        raise IllegalStateForEditError()


def earliest_event_date(now: datetime, published_on: datetime | None) -> datetime:
    """The earliest admissible event date given the publication moment, if any."""
    if published_on is not None:
        return published_on + settings.EVENT_PUBLICATION_LEAD_TIME
    return now + settings.EVENT_MIN_LEAD_TIME


def ensure_event_date(event_date: datetime, now: datetime, published_on: datetime | None = None) -> None:
    """Raise unless ``event_date`` respects the lead time."""
    earliest = earliest_event_date(now, published_on)
    if event_date < earliest:
        lead: timedelta = earliest - (published_on or now)
        anchor = "publication" if published_on is not None else "now"
        raise SchedulingConstraintViolationError(
            f"Event date must be at least {int(lead.total_seconds() // 3600)}h after {anchor}. Value: {event_date}"
        )


def has_free_seat(event: Event) -> bool:
    return not event.is_full


def requires_manual_confirmation(event: Event) -> bool:
    """Requests stay PENDING only for limited, moderated events."""
    return not event.is_unlimited and event.request_moderation
