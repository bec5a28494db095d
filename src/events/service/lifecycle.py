"""Event lifecycle state machine.

The machine is an explicit table of ``(state, action, role) -> state`` entries.
``apply_action`` is pure: it neither touches the database nor the clock, callers
persist the outcome and stamp side effects such as the publication date.
"""

from enum import StrEnum

from events.exceptions import InvalidTransitionError
from events.models import Event

State = Event.State


class StateAction(StrEnum):
    PUBLISH_EVENT = "PUBLISH_EVENT"
    REJECT_EVENT = "REJECT_EVENT"
    COMPLETE_EVENT = "COMPLETE_EVENT"
    SEND_TO_REVIEW = "SEND_TO_REVIEW"
    CANCEL_REVIEW = "CANCEL_REVIEW"


class ActorRole(StrEnum):
    ADMIN = "ADMIN"
    INITIATOR = "INITIATOR"


ADMIN_ACTIONS = frozenset({StateAction.PUBLISH_EVENT, StateAction.REJECT_EVENT, StateAction.COMPLETE_EVENT})
INITIATOR_ACTIONS = frozenset({StateAction.SEND_TO_REVIEW, StateAction.CANCEL_REVIEW})

TRANSITIONS: dict[tuple[str, StateAction, ActorRole], str] = {
    (State.PENDING, StateAction.PUBLISH_EVENT, ActorRole.ADMIN): State.PUBLISHED,
    (State.PENDING, StateAction.REJECT_EVENT, ActorRole.ADMIN): State.CANCELED,
    (State.PUBLISHED, StateAction.COMPLETE_EVENT, ActorRole.ADMIN): State.COMPLETED,
    (State.PENDING, StateAction.CANCEL_REVIEW, ActorRole.INITIATOR): State.CANCELED,
    (State.CANCELED, StateAction.SEND_TO_REVIEW, ActorRole.INITIATOR): State.PENDING,
}


def apply_action(state: str, action: StateAction, role: ActorRole) -> str:
    """Return the state reached by performing ``action`` as ``role`` from ``state``.

    Raises:
        InvalidTransitionError: if the table has no entry for the combination.
    """
    try:
        return TRANSITIONS[(state, action, role)]
    except KeyError:
        raise InvalidTransitionError(f"Cannot {action} an event in state {state} as {role.lower()}.")


def is_publication(state: str, action: StateAction) -> bool:
    """Whether the transition pins the publication date."""
    return state == State.PENDING and action == StateAction.PUBLISH_EVENT
