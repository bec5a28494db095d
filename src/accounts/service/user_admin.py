"""User management for admins."""

from uuid import UUID

import structlog
from django.db import transaction
from django.db.models import Q, QuerySet

from accounts.filters import AdminUserFilterSchema
from accounts.models import EwmUser
from accounts.schema import AdminUserCreateSchema
from accounts.service.account import get_user
from events.exceptions import DuplicateUserError
from events.models import Event
from events.service import rating_service
from events.service.admission import AdmissionController

logger = structlog.get_logger(__name__)


def create_user(payload: AdminUserCreateSchema) -> EwmUser:
    """Create an account. Without a password the account cannot log in until one is set.

    Raises:
        DuplicateUserError: if the email is already taken.
    """
    if EwmUser.objects.filter(Q(username__iexact=payload.email) | Q(email__iexact=payload.email)).exists():
        logger.warning("user_creation_duplicate", email=payload.email)
        raise DuplicateUserError()
    user = EwmUser.objects.create_user(
        username=payload.email,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    logger.info("user_created", user_id=str(user.pk), email=user.email)
    return user


def list_users(params: AdminUserFilterSchema) -> QuerySet[EwmUser]:
    """All users, or only the ones listed in ``params.ids``."""
    return params.filter(EwmUser.objects.all()).order_by("username", "id")


@transaction.atomic
def delete_user(user_id: UUID) -> None:
    """Delete an account with everything it owns.

    Seats held on other users' events are released and the ratings the user
    left are taken out of the event and organizer averages.

    Raises:
        NotFoundError: if no user with that id exists.
    """
    user = get_user(user_id)
    withdrawn = AdmissionController(user).withdraw_all()
    rated_events = list(Event.objects.filter(ratings__user=user).exclude(initiator=user).distinct())

    user.delete()

    for event in rated_events:
        rating_service.recompute_event_rating(event)
    for initiator_id in {event.initiator_id for event in rated_events}:
        rating_service.recompute_initiator_rating(initiator_id)
    logger.info(
        "user_deleted",
        user_id=str(user_id),
        requests_withdrawn=withdrawn,
        ratings_recomputed=len(rated_events),
    )
