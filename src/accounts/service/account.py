"""Identity lookups used by the event services."""

from uuid import UUID

import structlog

from accounts.models import EwmUser
from events.exceptions import NotFoundError

logger = structlog.get_logger(__name__)


def get_user(user_id: UUID) -> EwmUser:
    """Resolve a user id to an account.

    Raises:
        NotFoundError: if no user with that id exists.
    """
    try:
        return EwmUser.objects.get(pk=user_id)
    except EwmUser.DoesNotExist:
        logger.info("user_not_found", user_id=str(user_id))
        raise NotFoundError(f"User with id={user_id} was not found")
