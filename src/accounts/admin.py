"""Admin interface for accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from accounts.models import EwmUser


@admin.register(EwmUser)
class EwmUserAdmin(UserAdmin):  # type: ignore[type-arg]
    list_display = ["username", "email", "first_name", "last_name", "rating", "is_staff", "is_active"]
    readonly_fields = ["rating", "last_login", "date_joined"]
    fieldsets = (
        *(UserAdmin.fieldsets or ()),
        ("Reputation", {"fields": ("rating",)}),
    )
