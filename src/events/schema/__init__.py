"""Events schema package.

Schemas are organized into modules that mirror the models package and
re-exported here.
"""

from .category import CategoryEditSchema, CategorySchema
from .event import (
    AdminEventUpdateSchema,
    EventCreateSchema,
    EventInListSchema,
    EventRetrieveSchema,
    EventUpdateSchema,
    InitiatorEventUpdateSchema,
    LocationSchema,
)
from .participation import (
    ParticipationRequestCreateSchema,
    ParticipationRequestSchema,
    RequestDecision,
    RequestStatusUpdateResultSchema,
    RequestStatusUpdateSchema,
)
from .rating import RatingCreateSchema, RatingSchema, RatingSort

__all__ = [
    "AdminEventUpdateSchema",
    "CategoryEditSchema",
    "CategorySchema",
    "EventCreateSchema",
    "EventInListSchema",
    "EventRetrieveSchema",
    "EventUpdateSchema",
    "InitiatorEventUpdateSchema",
    "LocationSchema",
    "ParticipationRequestCreateSchema",
    "ParticipationRequestSchema",
    "RatingCreateSchema",
    "RatingSchema",
    "RatingSort",
    "RequestDecision",
    "RequestStatusUpdateResultSchema",
    "RequestStatusUpdateSchema",
]
