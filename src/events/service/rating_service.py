"""Event ratings and the reputation derived from them.

``Event.rating`` and ``EwmUser.rating`` are recomputed from scratch after each
accepted rating and each deletion. The aggregates scan every rating of the
event and of the organizer, which bounds how far this scales.
"""

from uuid import UUID

import structlog
from django.db import transaction
from django.db.models import Avg, QuerySet

from accounts.models import EwmUser
from accounts.service.account import get_user
from events.exceptions import DuplicateRatingError, NotFoundError
from events.models import Event, Rating
from events.schema import RatingCreateSchema, RatingSort

from . import guards

logger = structlog.get_logger(__name__)

RATING_ORDERINGS: dict[RatingSort, tuple[str, ...]] = {
    RatingSort.NEW_AND_USEFUL: ("-has_comment", "-created_at"),
    RatingSort.HIGH_RATING: ("-has_comment", "-score", "-created_at"),
    RatingSort.LOW_RATING: ("-has_comment", "score", "-created_at"),
}


def _round(value: float | None) -> float | None:
    return round(value, 2) if value is not None else None


def _get_event(event_id: UUID, lock: bool = False) -> Event:
    qs = Event.objects.select_for_update() if lock else Event.objects.all()
    try:
        return qs.get(pk=event_id)
    except Event.DoesNotExist:
        raise NotFoundError(f"Event with id={event_id} was not found")


def recompute_event_rating(event: Event) -> float | None:
    """Store the rounded mean score of ``event``; null once no ratings remain."""
    value = _round(Rating.objects.filter(event=event).aggregate(avg=Avg("score"))["avg"])
    Event.objects.filter(pk=event.pk).update(rating=value)
    event.rating = value
    return value


def recompute_initiator_rating(initiator_id: UUID) -> float | None:
    """Store the rounded mean of every rating left on events initiated by the user."""
    EwmUser.objects.select_for_update().only("pk").get(pk=initiator_id)
    value = _round(Rating.objects.filter(event__initiator_id=initiator_id).aggregate(avg=Avg("score"))["avg"])
    EwmUser.objects.filter(pk=initiator_id).update(rating=value)
    return value


def _recompute(event: Event) -> None:
    event_rating = recompute_event_rating(event)
    initiator_rating = recompute_initiator_rating(event.initiator_id)
    logger.info(
        "ratings_recomputed",
        event_id=str(event.pk),
        event_rating=event_rating,
        initiator_id=str(event.initiator_id),
        initiator_rating=initiator_rating,
    )


@transaction.atomic
def rate(user_id: UUID, event_id: UUID, payload: RatingCreateSchema) -> Rating:
    """Rate a completed event.

    Raises:
        NotFoundError, SelfRatingDeniedError, EventNotCompletedError, DuplicateRatingError
    """
    user = get_user(user_id)
    event = _get_event(event_id, lock=True)
    guards.ensure_not_initiator_for_rating(user.pk, event)
    guards.ensure_completed(event)
    if Rating.objects.filter(event=event, user=user).exists():
        raise DuplicateRatingError()
    rating = Rating.objects.create(event=event, user=user, score=payload.score, comment=payload.comment or "")
    logger.info("rating_created", rating_id=str(rating.pk), event_id=str(event.pk), user_id=str(user.pk))
    _recompute(event)
    return rating


@transaction.atomic
def delete_rating(user_id: UUID, rating_id: UUID) -> None:
    """Delete one's own rating and refresh the derived averages."""
    rating = Rating.objects.filter(pk=rating_id).first()
    if rating is None:
        raise NotFoundError(f"Rating with id={rating_id} was not found")
    guards.ensure_rater(user_id, rating)
    event = _get_event(rating.event_id, lock=True)
    rating.delete()
    logger.info("rating_deleted", rating_id=str(rating_id), event_id=str(event.pk), user_id=str(user_id))
    _recompute(event)


def get_rating(rating_id: UUID) -> Rating:
    rating = Rating.objects.with_relations().filter(pk=rating_id).first()
    if rating is None:
        raise NotFoundError(f"Rating with id={rating_id} was not found")
    return rating


def list_user_ratings(user_id: UUID) -> QuerySet[Rating]:
    """Ratings left by the user, newest first."""
    get_user(user_id)
    return Rating.objects.with_relations().filter(user_id=user_id).order_by("-created_at")


def list_event_ratings(event_id: UUID, sort: RatingSort = RatingSort.NEW_AND_USEFUL) -> QuerySet[Rating]:
    """Ratings of an event, commented ones first."""
    event = _get_event(event_id)
    qs = Rating.objects.with_relations().with_comment_flag().filter(event=event)
    return qs.order_by(*RATING_ORDERINGS[sort])
