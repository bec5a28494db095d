"""Event creation, editing and listing.

Edits run under a row lock on the event. State actions go through the
lifecycle table; lead-time rules go through the guards.
"""

import typing as t
from uuid import UUID

import structlog
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from accounts.service.account import get_user
from events.exceptions import NotFoundError
from events.filters import AdminEventFilterSchema, EventSort, PublicEventFilterSchema
from events.models import Event, EventQuerySet
from events.schema import AdminEventUpdateSchema, EventCreateSchema, EventUpdateSchema, InitiatorEventUpdateSchema

from . import guards, lifecycle
from .category_service import get_category

logger = structlog.get_logger(__name__)


def _not_found(event_id: UUID) -> NotFoundError:
    return NotFoundError(f"Event with id={event_id} was not found")


def _lock_event(event_id: UUID) -> Event:
    try:
        return Event.objects.select_for_update().get(pk=event_id)
    except Event.DoesNotExist:
        raise _not_found(event_id)


def _apply_field_changes(event: Event, payload: EventUpdateSchema) -> None:
    """Copy provided fields onto ``event``; ``None`` means "leave unchanged"."""
    data: dict[str, t.Any] = {
        k: v for k, v in payload.model_dump(exclude_unset=True, exclude={"state_action"}).items() if v is not None
    }
    if location := data.pop("location", None):
        event.location_lat = location["lat"]
        event.location_lon = location["lon"]
    if category_id := data.pop("category_id", None):
        event.category = get_category(category_id)
    for key, value in data.items():
        setattr(event, key, value)


@transaction.atomic
def create_event(initiator_id: UUID, payload: EventCreateSchema) -> Event:
    """Create a new event in PENDING state on behalf of ``initiator_id``."""
    initiator = get_user(initiator_id)
    category = get_category(payload.category_id)
    guards.ensure_event_date(payload.event_date, timezone.now())
    event = Event.objects.create(
        initiator=initiator,
        category=category,
        title=payload.title,
        annotation=payload.annotation,
        description=payload.description,
        location_lat=payload.location.lat,
        location_lon=payload.location.lon,
        event_date=payload.event_date,
        paid=payload.paid,
        participant_limit=payload.participant_limit,
        request_moderation=payload.request_moderation,
    )
    logger.info("event_created", event_id=str(event.pk), initiator_id=str(initiator.pk))
    return event


@transaction.atomic
def edit_by_initiator(user_id: UUID, event_id: UUID, payload: InitiatorEventUpdateSchema) -> Event:
    """Apply an owner edit.

    Published and completed events are frozen for their initiator. The optional
    state action lets the initiator withdraw a pending event or resubmit a
    canceled one.
    """
    event = _lock_event(event_id)
    guards.ensure_initiator(user_id, event)
    guards.ensure_editable_by_initiator(event)
    if payload.event_date is not None:
        guards.ensure_event_date(payload.event_date, timezone.now(), event.published_on)
    _apply_field_changes(event, payload)
    if payload.state_action is not None:
        previous = event.state
        event.state = lifecycle.apply_action(event.state, payload.state_action, lifecycle.ActorRole.INITIATOR)
        logger.info(
            "event_state_changed",
            event_id=str(event.pk),
            action=payload.state_action,
            from_state=previous,
            to_state=event.state,
        )
    event.save()
    return event


@transaction.atomic
def edit_by_admin(event_id: UUID, payload: AdminEventUpdateSchema) -> Event:
    """Apply an admin edit.

    The state action is applied before the date rule, so publishing and moving
    the date in one edit checks the new date against the fresh publication time.
    """
    event = _lock_event(event_id)
    now = timezone.now()
    if payload.state_action is not None:
        previous = event.state
        event.state = lifecycle.apply_action(event.state, payload.state_action, lifecycle.ActorRole.ADMIN)
        if lifecycle.is_publication(previous, payload.state_action):
            event.published_on = now
        logger.info(
            "event_state_changed",
            event_id=str(event.pk),
            action=payload.state_action,
            from_state=previous,
            to_state=event.state,
        )
    if payload.event_date is not None:
        guards.ensure_event_date(payload.event_date, now, event.published_on)
    _apply_field_changes(event, payload)
    event.save()
    return event


def get_initiator_event(user_id: UUID, event_id: UUID) -> Event:
    event = Event.objects.full().filter(pk=event_id).first()
    if event is None:
        raise _not_found(event_id)
    guards.ensure_initiator(user_id, event)
    return event


def list_initiator_events(user_id: UUID) -> EventQuerySet:
    get_user(user_id)
    return Event.objects.full().initiated_by(user_id).order_by("created_at")


def get_public_event(event_id: UUID) -> Event:
    """A published event; anything else is reported as missing."""
    event = Event.objects.full().published().filter(pk=event_id).first()
    if event is None:
        raise _not_found(event_id)
    return event


def list_public_events(
    params: PublicEventFilterSchema,
    sort: EventSort = EventSort.EVENT_DATE,
    offset: int = 0,
    limit: int = 10,
) -> list[Event]:
    """Search the public listing.

    The rating sort ranks completed events by their average score. The other
    sorts list published events and, without an explicit ``range_start``, only
    upcoming ones.
    """
    if sort == EventSort.RATING:
        qs = Event.objects.full().filter(state=Event.State.COMPLETED)
        qs = params.filter(qs).order_by(F("rating").desc(nulls_last=True), "event_date")
    else:
        qs = Event.objects.full().published()
        if params.range_start is None:
            qs = qs.filter(event_date__gte=timezone.now())
        qs = params.filter(qs)
        qs = qs.order_by("-views", "event_date") if sort == EventSort.VIEWS else qs.order_by("event_date")
    return list(qs[offset : offset + limit])


def list_admin_events(params: AdminEventFilterSchema) -> EventQuerySet:
    return t.cast(EventQuerySet, params.filter(Event.objects.full()).order_by("created_at"))
