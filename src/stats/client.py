"""HTTP client for the external view-count (stats) server."""

import typing as t
from datetime import UTC, datetime

import httpx
import structlog
from django.conf import settings

from .schema import STATS_DATETIME_FORMAT, EndpointHit, ViewStats

logger = structlog.get_logger(__name__)


class ViewCounter(t.Protocol):
    """What the read path needs from a view-count service."""

    def record_hit(self, app: str, path: str, ip: str, timestamp: datetime) -> None: ...

    def unique_hits(self, path: str, start: datetime, end: datetime) -> int: ...


class StatsClient:
    """Talks to the stats server.

    ``POST /hit`` records one request, ``GET /stats`` returns per-uri hit counts.
    Transport errors are raised as ``httpx.HTTPError`` and left to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Root URL of the stats server. Defaults to ``settings.STATS_SERVER_URL``.
            timeout: Per-request timeout in seconds. Defaults to ``settings.STATS_TIMEOUT_SECONDS``.
            transport: Optional httpx transport, used by tests to stub the server.
        """
        self.base_url = (base_url or settings.STATS_SERVER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.STATS_TIMEOUT_SECONDS
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Release the underlying connection pool."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def record_hit(self, app: str, path: str, ip: str, timestamp: datetime) -> None:
        """Register a single request to ``path``."""
        hit = EndpointHit(app=app, uri=path, ip=ip, timestamp=_naive_utc(timestamp))
        response = self._get_client().post("/hit", json=hit.model_dump(mode="json"))
        response.raise_for_status()
        logger.debug("stats_hit_recorded", app=app, uri=path)

    def get_stats(self, start: datetime, end: datetime, uris: list[str], unique: bool = True) -> list[ViewStats]:
        """Hit counts per uri in ``[start, end]``."""
        params: list[tuple[str, str]] = [
            ("start", _naive_utc(start).strftime(STATS_DATETIME_FORMAT)),
            ("end", _naive_utc(end).strftime(STATS_DATETIME_FORMAT)),
            ("unique", "true" if unique else "false"),
        ]
        params.extend(("uris", uri) for uri in uris)
        response = self._get_client().get("/stats", params=params)
        response.raise_for_status()
        return [ViewStats.model_validate(item) for item in response.json()]

    def unique_hits(self, path: str, start: datetime, end: datetime) -> int:
        """Number of distinct client addresses that requested ``path`` in ``[start, end]``."""
        stats = self.get_stats(start, end, [path], unique=True)
        return sum(s.hits for s in stats if s.uri == path)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value
