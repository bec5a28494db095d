from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_jwt.authentication import JWTAuth

from common.controllers import UserAwareController
from common.throttling import WriteThrottle
from events import models, schema
from events.service import event_service, rating_service
from events.service.admission import AdmissionController, BulkUpdateResult


@api_controller("/me/events", auth=JWTAuth(), tags=["My Events"], throttle=WriteThrottle())
class MyEventsController(UserAwareController):
    """Endpoints for event initiators."""

    @route.get("/", url_name="list_my_events", response=PaginatedResponseSchema[schema.EventInListSchema])
    @paginate(PageNumberPaginationExtra, page_size=20)
    def list_my_events(self) -> QuerySet[models.Event]:
        """List the events created by the authenticated user, in every state."""
        return event_service.list_initiator_events(self.user().pk)

    @route.post("/", url_name="create_event", response={201: schema.EventRetrieveSchema})
    def create_event(self, payload: schema.EventCreateSchema) -> tuple[int, models.Event]:
        """Create an event.

        New events start in PENDING state and wait for an admin to publish them. The event date
        must lie at least two hours in the future.
        """
        return 201, event_service.create_event(self.user().pk, payload)

    @route.get("/{event_id}", url_name="get_my_event", response=schema.EventRetrieveSchema)
    def get_my_event(self, event_id: UUID) -> models.Event:
        """Retrieve one of the user's events, whatever its state."""
        return event_service.get_initiator_event(self.user().pk, event_id)

    @route.patch("/{event_id}", url_name="update_my_event", response=schema.EventRetrieveSchema)
    def update_my_event(self, event_id: UUID, payload: schema.InitiatorEventUpdateSchema) -> models.Event:
        """Edit a pending or canceled event.

        `state_action=CANCEL_REVIEW` withdraws a pending event, `SEND_TO_REVIEW` resubmits a
        canceled one. Published and completed events cannot be edited by their initiator.
        """
        return event_service.edit_by_initiator(self.user().pk, event_id, payload)

    @route.get(
        "/{event_id}/requests", url_name="list_event_requests", response=list[schema.ParticipationRequestSchema]
    )
    def list_event_requests(self, event_id: UUID) -> list[models.ParticipationRequest]:
        """List every participation request to one of the user's events, oldest first."""
        return AdmissionController(self.user()).list_event_requests(event_id)

    @route.patch(
        "/{event_id}/requests", url_name="update_event_requests", response=schema.RequestStatusUpdateResultSchema
    )
    def update_event_requests(self, event_id: UUID, payload: schema.RequestStatusUpdateSchema) -> BulkUpdateResult:
        """Confirm or reject the pending participation requests of the event.

        The whole pending queue is processed oldest first, so no request is admitted ahead of an
        earlier one. When the participant limit is reached, every remaining pending request is
        rejected. Returns the full confirmed and rejected sets of the event.
        """
        return AdmissionController(self.user()).bulk_update_status(event_id, payload.status)

    @route.post("/{event_id}/ratings", url_name="rate_event", response={201: schema.RatingSchema})
    def rate_event(self, event_id: UUID, payload: schema.RatingCreateSchema) -> tuple[int, models.Rating]:
        """Rate a completed event you did not organize. Each user rates an event once."""
        return 201, rating_service.rate(self.user().pk, event_id, payload)
