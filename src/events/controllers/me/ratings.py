from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_jwt.authentication import JWTAuth

from common.controllers import UserAwareController
from events import models, schema
from events.service import rating_service


@api_controller("/me/ratings", auth=JWTAuth(), tags=["My Ratings"])
class MyRatingsController(UserAwareController):
    @route.get("/", url_name="list_my_ratings", response=PaginatedResponseSchema[schema.RatingSchema])
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_my_ratings(self) -> QuerySet[models.Rating]:
        """List the ratings left by the user, newest first."""
        return rating_service.list_user_ratings(self.user().pk)

    @route.delete("/{rating_id}", url_name="delete_my_rating", response={204: None})
    def delete_my_rating(self, rating_id: UUID) -> tuple[int, None]:
        """Delete one of the user's ratings. Event and organizer averages are recomputed."""
        rating_service.delete_rating(self.user().pk, rating_id)
        return 204, None
