"""Domain errors raised by the event services.

Every error carries a stable machine-readable ``code``, a short human ``reason``
and the HTTP status the API maps it to.
"""

import typing as t


class EventDomainError(Exception):
    """Base class for all errors raised by the event services."""

    code: t.ClassVar[str] = "DOMAIN_ERROR"
    reason: t.ClassVar[str] = "The request could not be processed."
    status_code: t.ClassVar[int] = 400

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.reason
        super().__init__(self.detail)


class NotFoundError(EventDomainError):
    code = "NOT_FOUND"
    reason = "The required object was not found."
    status_code = 404


class InvalidTransitionError(EventDomainError):
    code = "INVALID_TRANSITION"
    reason = "The requested state change is not allowed."
    status_code = 409


class IllegalStateForEditError(EventDomainError):
    code = "ILLEGAL_STATE_FOR_EDIT"
    reason = "Only pending or canceled events can be changed."
    status_code = 409


class SchedulingConstraintViolationError(EventDomainError):
    code = "SCHEDULING_CONSTRAINT_VIOLATION"
    reason = "The event date is too close."
    status_code = 400


class SelfParticipationDeniedError(EventDomainError):
    code = "SELF_PARTICIPATION_DENIED"
    reason = "The initiator of an event cannot request participation in it."
    status_code = 409


class SelfRatingDeniedError(EventDomainError):
    code = "SELF_RATING_DENIED"
    reason = "The initiator of an event cannot rate it."
    status_code = 400


class CapacityExceededError(EventDomainError):
    code = "CAPACITY_EXCEEDED"
    reason = "The participant limit has been reached."
    status_code = 409


class EventNotOpenError(EventDomainError):
    code = "EVENT_NOT_OPEN"
    reason = "Participation requests are only accepted for published events."
    status_code = 409


class EventNotCompletedError(EventDomainError):
    code = "EVENT_NOT_COMPLETED"
    reason = "Only completed events can be rated."
    status_code = 409


class DuplicateRatingError(EventDomainError):
    code = "DUPLICATE_RATING"
    reason = "The event has already been rated by this user."
    status_code = 409


class DuplicateParticipationRequestError(EventDomainError):
    code = "DUPLICATE_PARTICIPATION_REQUEST"
    reason = "A participation request for this event already exists."
    status_code = 409


class NoPendingRequestsError(EventDomainError):
    code = "NO_PENDING_REQUESTS"
    reason = "Request must have status PENDING."
    status_code = 409


class CategoryInUseError(EventDomainError):
    code = "CATEGORY_IN_USE"
    reason = "The category is not empty."
    status_code = 409


class DuplicateCategoryError(EventDomainError):
    code = "DUPLICATE_CATEGORY"
    reason = "A category with this name already exists."
    status_code = 409


class DuplicateUserError(EventDomainError):
    code = "DUPLICATE_USER"
    reason = "A user with this email already exists."
    status_code = 409
