from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import ControllerBase, api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate

from events import models, schema
from events.service import rating_service


@api_controller("/ratings", tags=["Ratings"])
class RatingController(ControllerBase):
    @route.get(
        "/events/{event_id}", url_name="list_event_ratings", response=PaginatedResponseSchema[schema.RatingSchema]
    )
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_event_ratings(
        self, event_id: UUID, sort: schema.RatingSort = schema.RatingSort.NEW_AND_USEFUL
    ) -> QuerySet[models.Rating]:
        """List the ratings of an event.

        Ratings with a comment always come first. `NEW_AND_USEFUL` then orders by recency,
        `HIGH_RATING` and `LOW_RATING` by score.
        """
        return rating_service.list_event_ratings(event_id, sort)

    @route.get("/{rating_id}", url_name="get_rating", response=schema.RatingSchema)
    def get_rating(self, rating_id: UUID) -> models.Rating:
        """Retrieve a single rating."""
        return rating_service.get_rating(rating_id)
