import typing as t

from django.conf import settings
from django.core.validators import MaxValueValidator, MinLengthValidator, MinValueValidator
from django.db import models
from django.db.models import Case, IntegerField, Value, When

from common.models import TimeStampedModel

from .event import Event


class RatingQuerySet(models.QuerySet["Rating"]):
    def with_relations(self) -> t.Self:
        """Select the rater and the event."""
        return self.select_related("user", "event")

    def with_comment_flag(self) -> t.Self:
        """Annotate `has_comment` (1 when a comment was left, else 0) for "useful first" orderings."""
        return self.annotate(
            has_comment=Case(
                When(comment="", then=Value(0)),
                default=Value(1),
                output_field=IntegerField(),
            )
        )


class Rating(TimeStampedModel):
    MIN_SCORE = 1.0
    MAX_SCORE = 5.0

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="ratings")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ratings")
    score = models.FloatField(validators=[MinValueValidator(MIN_SCORE), MaxValueValidator(MAX_SCORE)])
    comment = models.TextField(blank=True, default="", max_length=5000, validators=[MinLengthValidator(20)])

    objects = RatingQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_rating_per_event_user"),
        ]

    def __str__(self) -> str:
        return f"{self.score} for {self.event_id}"
