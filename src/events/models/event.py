import typing as t

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models
from django.db.models import F, Q

from common.models import TimeStampedModel

from .category import Category


class EventQuerySet(models.QuerySet["Event"]):
    def full(self) -> t.Self:
        """Select the initiator and the category in the same query."""
        return self.select_related("initiator", "category")

    def published(self) -> t.Self:
        """Only events visible to the public."""
        return self.filter(state=Event.State.PUBLISHED)

    def initiated_by(self, user_id: t.Any) -> t.Self:
        """Events created by the given user."""
        return self.filter(initiator_id=user_id)


class EventManager(models.Manager["Event"]):
    def get_queryset(self) -> EventQuerySet:
        """Get base queryset."""
        return EventQuerySet(self.model, using=self._db)

    def full(self) -> EventQuerySet:
        """Returns a queryset with initiator and category selected."""
        return self.get_queryset().full()

    def published(self) -> EventQuerySet:
        """Returns a queryset of published events."""
        return self.get_queryset().published()


class Event(TimeStampedModel):
    class State(models.TextChoices):
        PENDING = "PENDING", "Pending"
        PUBLISHED = "PUBLISHED", "Published"
        CANCELED = "CANCELED", "Canceled"
        COMPLETED = "COMPLETED", "Completed"

    state = models.CharField(choices=State.choices, default=State.PENDING, max_length=20, db_index=True)
    initiator = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="initiated_events"
    )
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name="events")
    title = models.CharField(max_length=120, validators=[MinLengthValidator(3)])
    annotation = models.TextField(max_length=2000, validators=[MinLengthValidator(20)])
    description = models.TextField(max_length=7000, validators=[MinLengthValidator(20)])
    location_lat = models.FloatField(validators=[MinValueValidator(-90.0), MaxValueValidator(90.0)])
    location_lon = models.FloatField(validators=[MinValueValidator(-180.0), MaxValueValidator(180.0)])
    event_date = models.DateTimeField(db_index=True)
    published_on = models.DateTimeField(null=True, blank=True, editable=False)
    paid = models.BooleanField(default=False)
    participant_limit = models.PositiveIntegerField(default=0, help_text="0 means unlimited")
    request_moderation = models.BooleanField(default=True)
    confirmed_requests = models.PositiveIntegerField(default=0, editable=False)
    views = models.PositiveBigIntegerField(default=0, editable=False)
    rating = models.FloatField(null=True, blank=True, editable=False)

    objects = EventManager()

    class Meta:
        ordering = ["event_date"]
        constraints = [
            models.CheckConstraint(
                condition=Q(participant_limit=0) | Q(confirmed_requests__lte=F("participant_limit")),
                name="event_confirmed_requests_within_limit",
            ),
        ]
        indexes = [
            models.Index(fields=["state", "event_date"], name="event_state_date_idx"),
        ]

    def __str__(self) -> str:
        return self.title

    @property
    def location(self) -> dict[str, float]:
        """Coordinates as a mapping."""
        return {"lat": self.location_lat, "lon": self.location_lon}

    @property
    def is_unlimited(self) -> bool:
        """Whether the event accepts any number of participants."""
        return self.participant_limit == 0

    @property
    def is_full(self) -> bool:
        """Whether every seat has been taken."""
        return not self.is_unlimited and self.confirmed_requests >= self.participant_limit
