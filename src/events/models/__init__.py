from .category import Category
from .event import Event, EventQuerySet
from .participation import ParticipationRequest
from .rating import Rating

__all__ = [
    "Category",
    "Event",
    "EventQuerySet",
    "ParticipationRequest",
    "Rating",
]
