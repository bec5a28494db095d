from uuid import UUID

from ninja import Query
from ninja_extra import api_controller, route

from common.authentication import OptionalAuth
from common.controllers import UserAwareController
from events import filters, models, schema
from events.service import event_service, view_service


@api_controller("/events", auth=OptionalAuth(), tags=["Events"])
class EventController(UserAwareController):
    @route.get("/", url_name="list_events", response=list[schema.EventInListSchema])
    def list_events(
        self,
        params: filters.PublicEventFilterSchema = Query(...),  # type: ignore[type-arg]
        sort: filters.EventSort = filters.EventSort.EVENT_DATE,
        offset: int = Query(0, ge=0),  # type: ignore[type-arg]
        limit: int = Query(10, ge=1, le=100),  # type: ignore[type-arg]
    ) -> list[models.Event]:
        """Browse published events.

        Supports full-text search in annotation and description, filtering by categories, price and
        date range, and hiding events without free seats. Without `range_start` only upcoming events
        are listed. `sort=RATING` ranks completed events by their average score instead.
        Every call is reported to the stats server and view counts are refreshed from it.
        """
        events = event_service.list_public_events(params, sort=sort, offset=offset, limit=limit)
        view_service.track_read(events, "/events", self.client_ip())
        return events

    @route.get("/{event_id}", url_name="get_event", response=schema.EventRetrieveSchema)
    def get_event(self, event_id: UUID) -> models.Event:
        """Retrieve a published event with its current view count."""
        event = event_service.get_public_event(event_id)
        view_service.track_read([event], view_service.event_path(event.pk), self.client_ip())
        return event
