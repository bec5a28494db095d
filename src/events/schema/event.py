"""Event schemas."""

import typing as t
from uuid import UUID

from ninja import ModelSchema, Schema
from pydantic import AwareDatetime, Field, StringConstraints, field_validator

from accounts.schema import UserShortSchema
from events.models import Event
from events.service.lifecycle import ADMIN_ACTIONS, INITIATOR_ACTIONS, StateAction

from .category import CategorySchema

Title = t.Annotated[str, StringConstraints(min_length=3, max_length=120, strip_whitespace=True)]
Annotation = t.Annotated[str, StringConstraints(min_length=20, max_length=2000, strip_whitespace=True)]
Description = t.Annotated[str, StringConstraints(min_length=20, max_length=7000, strip_whitespace=True)]


class LocationSchema(Schema):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class EventCreateSchema(Schema):
    title: Title
    annotation: Annotation
    description: Description
    category_id: UUID
    location: LocationSchema
    event_date: AwareDatetime
    paid: bool = False
    participant_limit: int = Field(0, ge=0, description="0 means unlimited")
    request_moderation: bool = True


class EventUpdateSchema(Schema):
    """Partial update; omitted fields keep their value."""

    title: Title | None = None
    annotation: Annotation | None = None
    description: Description | None = None
    category_id: UUID | None = None
    location: LocationSchema | None = None
    event_date: AwareDatetime | None = None
    paid: bool | None = None
    participant_limit: int | None = Field(None, ge=0)
    request_moderation: bool | None = None
    state_action: StateAction | None = None


class InitiatorEventUpdateSchema(EventUpdateSchema):
    @field_validator("state_action")
    @classmethod
    def validate_state_action(cls, v: StateAction | None) -> StateAction | None:
        """Initiators may only withdraw an event from review or send it back."""
        if v is not None and v not in INITIATOR_ACTIONS:
            raise ValueError(f"{v} is not available to the initiator.")
        return v


class AdminEventUpdateSchema(EventUpdateSchema):
    @field_validator("state_action")
    @classmethod
    def validate_state_action(cls, v: StateAction | None) -> StateAction | None:
        """Admins publish, reject or complete events."""
        if v is not None and v not in ADMIN_ACTIONS:
            raise ValueError(f"{v} is not available to admins.")
        return v


class EventInListSchema(ModelSchema):
    id: UUID
    category: CategorySchema
    initiator: UserShortSchema
    event_date: AwareDatetime

    class Meta:
        model = Event
        fields = ["id", "title", "annotation", "paid", "confirmed_requests", "views", "rating"]


class EventRetrieveSchema(ModelSchema):
    id: UUID
    state: Event.State
    category: CategorySchema
    initiator: UserShortSchema
    location: LocationSchema
    event_date: AwareDatetime
    created_at: AwareDatetime
    published_on: AwareDatetime | None = None

    class Meta:
        model = Event
        fields = [
            "id",
            "title",
            "annotation",
            "description",
            "paid",
            "participant_limit",
            "request_moderation",
            "confirmed_requests",
            "views",
            "rating",
        ]
