"""Public read path decoration: hit recording and view counts.

View counts are owned by the external stats server. Each public read records a
hit and then overwrites ``Event.views`` with the server's unique-hit count; the
value is never incremented locally.
"""

import functools
import typing as t

import httpx
import structlog
from django.conf import settings
from django.utils import timezone

from events.models import Event
from stats.client import StatsClient, ViewCounter

logger = structlog.get_logger(__name__)


@functools.cache
def _default_counter() -> StatsClient:
    return StatsClient()


def get_view_counter() -> ViewCounter:
    """The view counter used by the read path."""
    return _default_counter()


def event_path(event_id: t.Any) -> str:
    return f"/events/{event_id}"


def record_hit(path: str, ip: str) -> None:
    """Record one public read. A stats outage never fails the read."""
    try:
        get_view_counter().record_hit(settings.STATS_APP_NAME, path, ip, timezone.now())
    except httpx.HTTPError as e:
        logger.warning("stats_hit_failed", path=path, error=str(e))


def refresh_views(events: t.Iterable[Event]) -> None:
    """Overwrite ``views`` of each event with its unique-hit count since creation.

    Counts that cannot be fetched leave the stored value unchanged.
    """
    counter = get_view_counter()
    now = timezone.now()
    for event in events:
        try:
            hits = counter.unique_hits(event_path(event.pk), event.created_at, now)
        except httpx.HTTPError as e:
            logger.warning("stats_views_unavailable", event_id=str(event.pk), error=str(e))
            continue
        if hits != event.views:
            Event.objects.filter(pk=event.pk).update(views=hits)
            event.views = hits


def track_read(events: t.Sequence[Event], path: str, ip: str) -> None:
    """Record the hit for ``path`` and refresh the view counts of ``events``."""
    record_hit(path, ip)
    refresh_views(events)
