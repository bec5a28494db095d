"""Rating schemas."""

import typing as t
from enum import StrEnum
from uuid import UUID

from ninja import ModelSchema, Schema
from pydantic import AwareDatetime, Field, StringConstraints

from accounts.schema import UserShortSchema
from events.models import Rating

Comment = t.Annotated[str, StringConstraints(min_length=20, max_length=5000, strip_whitespace=True)]


class RatingSort(StrEnum):
    NEW_AND_USEFUL = "NEW_AND_USEFUL"
    HIGH_RATING = "HIGH_RATING"
    LOW_RATING = "LOW_RATING"


class RatingCreateSchema(Schema):
    score: float = Field(..., ge=Rating.MIN_SCORE, le=Rating.MAX_SCORE)
    comment: Comment | None = None


class RatingSchema(ModelSchema):
    id: UUID
    event_id: UUID
    user: UserShortSchema
    created_at: AwareDatetime

    class Meta:
        model = Rating
        fields = ["id", "score", "comment", "created_at"]
