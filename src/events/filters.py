# src/events/filters.py

from enum import StrEnum
from uuid import UUID

from django.db.models import F, Q
from ninja import Field, FilterSchema
from pydantic import AwareDatetime, model_validator

from events.models import Event


class EventSort(StrEnum):
    EVENT_DATE = "EVENT_DATE"
    VIEWS = "VIEWS"
    RATING = "RATING"


class EventDateRangeMixin(FilterSchema):
    range_start: AwareDatetime | None = Field(None, q="event_date__gte")  # type: ignore[call-overload]
    range_end: AwareDatetime | None = Field(None, q="event_date__lte")  # type: ignore[call-overload]
    categories: list[UUID] | None = Field(None, q="category_id__in")  # type: ignore[call-overload]

    @model_validator(mode="after")
    def check_range(self) -> "EventDateRangeMixin":
        """Reject inverted date ranges."""
        if self.range_start and self.range_end and self.range_start > self.range_end:
            raise ValueError("range_start must not be after range_end")
        return self


class PublicEventFilterSchema(EventDateRangeMixin):
    text: str | None = None
    paid: bool | None = None
    only_available: bool = False

    def filter_text(self, text: str | None) -> Q:
        """Case-insensitive search in annotation and description."""
        if not text:
            return Q()
        return Q(annotation__icontains=text) | Q(description__icontains=text)

    def filter_only_available(self, only_available: bool) -> Q:
        """Helper to find events that still have free seats."""
        if only_available:
            return Q(participant_limit=0) | Q(confirmed_requests__lt=F("participant_limit"))
        return Q()


class AdminEventFilterSchema(EventDateRangeMixin):
    users: list[UUID] | None = Field(None, q="initiator_id__in")  # type: ignore[call-overload]
    states: list[Event.State] | None = Field(None, q="state__in")  # type: ignore[call-overload]
