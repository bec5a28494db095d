import typing as t

from django.conf import settings
from django.db import models
from django.db.models import Q

from common.models import TimeStampedModel

from .event import Event


class ParticipationRequestQuerySet(models.QuerySet["ParticipationRequest"]):
    def active(self) -> t.Self:
        """Requests that still hold or claim a seat."""
        return self.exclude(status=ParticipationRequest.Status.CANCELED)

    def pending(self) -> t.Self:
        """Requests awaiting the organizer's decision."""
        return self.filter(status=ParticipationRequest.Status.PENDING)

    def in_processing_order(self) -> t.Self:
        """Oldest first."""
        return self.order_by("created_at", "id")


class ParticipationRequest(TimeStampedModel):
    class Status(models.TextChoices):
        PENDING = "PENDING", "Pending"
        CONFIRMED = "CONFIRMED", "Confirmed"
        REJECTED = "REJECTED", "Rejected"
        CANCELED = "CANCELED", "Canceled"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="participation_requests")
    requester = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="participation_requests"
    )
    status = models.CharField(choices=Status.choices, default=Status.PENDING, max_length=20, db_index=True)

    objects = ParticipationRequestQuerySet.as_manager()

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "requester"],
                condition=~Q(status="CANCELED"),
                name="unique_active_participation_request",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.requester_id} -> {self.event_id} ({self.status})"
