from uuid import UUID

from ninja_extra import api_controller, route
from ninja_jwt.authentication import JWTAuth

from common.controllers import UserAwareController
from common.throttling import ParticipationRequestThrottle, WriteThrottle
from events import models, schema
from events.service.admission import AdmissionController


@api_controller("/me/requests", auth=JWTAuth(), tags=["My Requests"], throttle=WriteThrottle())
class MyRequestsController(UserAwareController):
    """Participation requests of the authenticated user."""

    def admission(self) -> AdmissionController:
        return AdmissionController(self.user())

    @route.get("/", url_name="list_my_requests", response=list[schema.ParticipationRequestSchema])
    def list_my_requests(self) -> list[models.ParticipationRequest]:
        """List the user's participation requests, oldest first."""
        return self.admission().list_requests()

    @route.post(
        "/",
        url_name="create_request",
        response={201: schema.ParticipationRequestSchema},
        throttle=ParticipationRequestThrottle(),
    )
    def create_request(
        self, payload: schema.ParticipationRequestCreateSchema
    ) -> tuple[int, models.ParticipationRequest]:
        """Request participation in a published event.

        The request is confirmed immediately when the event has no participant limit or does not
        moderate requests; otherwise it stays PENDING until the initiator decides.
        """
        return 201, self.admission().submit(payload.event_id)

    @route.patch("/{request_id}/cancel", url_name="cancel_request", response=schema.ParticipationRequestSchema)
    def cancel_request(self, request_id: UUID) -> models.ParticipationRequest:
        """Cancel one of the user's requests. A confirmed request gives its seat back."""
        return self.admission().cancel(request_id)
