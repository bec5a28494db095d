"""Participation request schemas."""

from enum import StrEnum
from uuid import UUID

from ninja import ModelSchema, Schema
from pydantic import AwareDatetime

from events.models import ParticipationRequest


class ParticipationRequestSchema(ModelSchema):
    id: UUID
    event_id: UUID
    requester_id: UUID
    status: ParticipationRequest.Status
    created_at: AwareDatetime

    class Meta:
        model = ParticipationRequest
        fields = ["id", "status", "created_at"]


class ParticipationRequestCreateSchema(Schema):
    event_id: UUID


class RequestDecision(StrEnum):
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"


class RequestStatusUpdateSchema(Schema):
    """Bulk decision on the pending requests of an event.

    The decision applies to the event's whole pending queue in arrival order.
    ``request_ids`` is accepted for client compatibility and does not narrow it.
    """

    request_ids: list[UUID] = []
    status: RequestDecision


class RequestStatusUpdateResultSchema(Schema):
    confirmed_requests: list[ParticipationRequestSchema]
    rejected_requests: list[ParticipationRequestSchema]
