"""Admission control for participation requests.

``confirmed_requests`` is the hot counter of the system. Every path that
changes it locks the event row first and then changes the counter with a
conditional UPDATE, so even without row locks (SQLite) the counter cannot pass
the participant limit. A database check constraint backs the same invariant.
"""

import typing as t
from uuid import UUID

import structlog
from django.db import transaction
from django.db.models import F, Q

from accounts.models import EwmUser
from accounts.service.account import get_user
from events.exceptions import (
    CapacityExceededError,
    DuplicateParticipationRequestError,
    NoPendingRequestsError,
    NotFoundError,
)
from events.models import Event, ParticipationRequest

from . import guards

logger = structlog.get_logger(__name__)

Status = ParticipationRequest.Status
FINAL_STATUSES = frozenset({Status.CANCELED, Status.REJECTED})


class BulkUpdateResult(t.NamedTuple):
    confirmed_requests: list[ParticipationRequest]
    rejected_requests: list[ParticipationRequest]


def _lock_event(event_id: UUID) -> Event:
    try:
        return Event.objects.select_for_update().get(pk=event_id)
    except Event.DoesNotExist:
        raise NotFoundError(f"Event with id={event_id} was not found")


class AdmissionController:
    """Accepts, cancels and moderates participation requests for one user.

    The user is the requester for ``submit``/``cancel`` and the event
    initiator for the moderation methods.
    """

    def __init__(self, user: EwmUser) -> None:
        """Initialize the AdmissionController."""
        self.user = user

    @classmethod
    def for_user_id(cls, user_id: UUID) -> "AdmissionController":
        """Resolve the acting user first; unknown ids are NotFound."""
        return cls(get_user(user_id))

    @transaction.atomic
    def submit(self, event_id: UUID) -> ParticipationRequest:
        """Request participation in an event.

        The request is confirmed right away when the event is unlimited or
        unmoderated, otherwise it waits for the initiator.

        Raises:
            NotFoundError, SelfParticipationDeniedError, EventNotOpenError,
            DuplicateParticipationRequestError, CapacityExceededError
        """
        event = _lock_event(event_id)
        guards.ensure_not_initiator_for_participation(self.user.pk, event)
        guards.ensure_published(event)
        if ParticipationRequest.objects.active().filter(event=event, requester=self.user).exists():
            raise DuplicateParticipationRequestError()
        if not guards.has_free_seat(event):
            raise CapacityExceededError()

        status = Status.PENDING if guards.requires_manual_confirmation(event) else Status.CONFIRMED
        if status == Status.CONFIRMED:
            self._reserve_seat(event)
        request = ParticipationRequest.objects.create(event=event, requester=self.user, status=status)
        logger.info(
            "participation_requested",
            request_id=str(request.pk),
            event_id=str(event.pk),
            requester_id=str(self.user.pk),
            status=status,
        )
        return request

    @transaction.atomic
    def cancel(self, request_id: UUID) -> ParticipationRequest:
        """Cancel one's own request. Cancelling a confirmed request frees its seat.

        Canceled and rejected requests are final; cancelling them again changes nothing.
        """
        request = ParticipationRequest.objects.filter(pk=request_id).first()
        if request is None:
            raise NotFoundError(f"Request with id={request_id} was not found")
        guards.ensure_requester(self.user.pk, request)

        # event first, same lock order as submit
        _lock_event(request.event_id)
        request = ParticipationRequest.objects.select_for_update().get(pk=request_id)
        if request.status in FINAL_STATUSES:
            return request
        was_confirmed = request.status == Status.CONFIRMED
        request.status = Status.CANCELED
        request.save(update_fields=["status", "updated_at"])
        if was_confirmed:
            self._release_seat(request.event_id)
        logger.info(
            "participation_canceled",
            request_id=str(request.pk),
            event_id=str(request.event_id),
            seat_released=was_confirmed,
        )
        return request

    @transaction.atomic
    def withdraw_all(self) -> int:
        """Cancel every open request of the user and return how many were canceled."""
        open_requests = (
            ParticipationRequest.objects.filter(requester=self.user)
            .exclude(status__in=FINAL_STATUSES)
            .order_by("event_id")
            .values_list("pk", flat=True)
        )
        request_ids = list(open_requests)
        for request_id in request_ids:
            self.cancel(request_id)
        return len(request_ids)

    @transaction.atomic
    def bulk_update_status(self, event_id: UUID, target_status: str) -> BulkUpdateResult:
        """Confirm or reject the pending requests of one of the user's events.

        Every pending request is processed oldest first, so a later request is
        never admitted ahead of an earlier one. Once the participant limit is
        reached the remaining pending requests are rejected.
        """
        event = _lock_event(event_id)
        guards.ensure_initiator(self.user.pk, event)

        if not guards.requires_manual_confirmation(event):
            return BulkUpdateResult(
                confirmed_requests=list(ParticipationRequest.objects.filter(event=event).in_processing_order()),
                rejected_requests=[],
            )

        pending = list(
            ParticipationRequest.objects.select_for_update().filter(event=event).pending().in_processing_order()
        )
        if not pending:
            raise NoPendingRequestsError()
        if target_status == Status.CONFIRMED and not guards.has_free_seat(event):
            raise CapacityExceededError()

        confirmed_before = event.confirmed_requests
        for request in pending:
            if guards.has_free_seat(event):
                request.status = target_status
                if target_status == Status.CONFIRMED:
                    event.confirmed_requests += 1
            else:
                request.status = Status.REJECTED
            request.save(update_fields=["status", "updated_at"])

        if event.confirmed_requests != confirmed_before:
            self._set_confirmed(event, confirmed_before)

        logger.info(
            "participation_requests_moderated",
            event_id=str(event.pk),
            target_status=target_status,
            processed=len(pending),
            confirmed_requests=event.confirmed_requests,
        )
        requests = ParticipationRequest.objects.filter(event=event).in_processing_order()
        return BulkUpdateResult(
            confirmed_requests=list(requests.filter(status=Status.CONFIRMED)),
            rejected_requests=list(requests.filter(status=Status.REJECTED)),
        )

    def list_requests(self) -> list[ParticipationRequest]:
        """The user's own requests."""
        return list(ParticipationRequest.objects.filter(requester=self.user).in_processing_order())

    def list_event_requests(self, event_id: UUID) -> list[ParticipationRequest]:
        """Requests to one of the user's events."""
        event = Event.objects.filter(pk=event_id).first()
        if event is None:
            raise NotFoundError(f"Event with id={event_id} was not found")
        guards.ensure_initiator(self.user.pk, event)
        return list(ParticipationRequest.objects.filter(event=event).in_processing_order())

    @staticmethod
    def _reserve_seat(event: Event) -> None:
        """Take one seat with a compare-and-swap on the counter.

        The condition is evaluated by the database, so a stale ``event``
        snapshot cannot push the counter over the limit.
        """
        updated = (
            Event.objects.filter(pk=event.pk)
            .filter(Q(participant_limit=0) | Q(confirmed_requests__lt=F("participant_limit")))
            .update(confirmed_requests=F("confirmed_requests") + 1)
        )
        if not updated:
            raise CapacityExceededError()
        event.refresh_from_db(fields=["confirmed_requests"])

    @staticmethod
    def _release_seat(event_id: UUID) -> None:
        Event.objects.filter(pk=event_id, confirmed_requests__gt=0).update(
            confirmed_requests=F("confirmed_requests") - 1
        )

    @staticmethod
    def _set_confirmed(event: Event, expected: int) -> None:
        """Write the counter only if nobody moved it since we read it."""
        updated = Event.objects.filter(pk=event.pk, confirmed_requests=expected).update(
            confirmed_requests=event.confirmed_requests
        )
        if not updated:
            raise CapacityExceededError("The participant counter changed concurrently.")
