import uuid

from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class EwmUserQueryset(models.QuerySet["EwmUser"]):
    """Queryset for EwmUser."""


class EwmUserManager(UserManager["EwmUser"]):
    def get_queryset(self) -> EwmUserQueryset:
        """Get queryset for EwmUser."""
        return EwmUserQueryset(self.model, using=self._db)


class EwmUser(AbstractUser):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rating = models.FloatField(
        null=True,
        blank=True,
        editable=False,
        help_text="Average score of all ratings left on events initiated by this user.",
    )

    objects = EwmUserManager()  # type: ignore[misc]

    class Meta:
        ordering = ["username"]

    @property
    def display_name(self) -> str:
        """Full name, falling back to the username."""
        return self.get_full_name() or self.username
