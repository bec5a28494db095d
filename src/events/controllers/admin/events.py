from uuid import UUID

from django.db.models import QuerySet
from ninja import Query
from ninja_extra import api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_extra.permissions import IsAdminUser
from ninja_jwt.authentication import JWTAuth

from common.controllers import UserAwareController
from common.throttling import WriteThrottle
from events import filters, models, schema
from events.service import event_service


@api_controller(
    "/admin/events",
    auth=JWTAuth(),
    permissions=[IsAdminUser],
    tags=["Admin: Events"],
    throttle=WriteThrottle(),
)
class AdminEventsController(UserAwareController):
    @route.get("/", url_name="admin_list_events", response=PaginatedResponseSchema[schema.EventRetrieveSchema])
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_events(
        self,
        params: filters.AdminEventFilterSchema = Query(...),  # type: ignore[type-arg]
    ) -> QuerySet[models.Event]:
        """Search all events regardless of state, by initiators, states, categories and date range."""
        return event_service.list_admin_events(params)

    @route.patch("/{event_id}", url_name="admin_update_event", response=schema.EventRetrieveSchema)
    def update_event(self, event_id: UUID, payload: schema.AdminEventUpdateSchema) -> models.Event:
        """Edit any event and drive its moderation.

        `PUBLISH_EVENT` and `REJECT_EVENT` apply to pending events, `COMPLETE_EVENT` to published
        ones. Publishing stamps the publication time; a new event date must then lie at least one
        hour after it.
        """
        return event_service.edit_by_admin(event_id, payload)
