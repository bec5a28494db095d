"""Admin interface for the events app."""

from django.contrib import admin

from events.models import Category, Event, ParticipationRequest, Rating


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["name", "created_at"]
    search_fields = ["name"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["title", "state", "initiator", "category", "event_date", "confirmed_requests", "views", "rating"]
    list_filter = ["state", "category", "paid", "request_moderation"]
    search_fields = ["title", "annotation", "initiator__username"]
    readonly_fields = ["published_on", "confirmed_requests", "views", "rating", "created_at", "updated_at"]
    autocomplete_fields = ["category"]
    raw_id_fields = ["initiator"]


@admin.register(ParticipationRequest)
class ParticipationRequestAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["event", "requester", "status", "created_at"]
    list_filter = ["status"]
    raw_id_fields = ["event", "requester"]


@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["event", "user", "score", "created_at"]
    readonly_fields = ["event", "user", "score", "comment", "created_at"]
