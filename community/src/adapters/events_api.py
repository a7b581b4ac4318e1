"""
Gateway HTTP client for calendar views.

Reads /api/events and /api/rooms over a shared httpx.Client. Transport
failures (connect, timeout) and non-2xx responses surface as
TransientFetchError so CalendarView can keep its last events and show the
retry banner.

Example:
    >>> client = EventsApiClient(httpx.Client(), base_url="http://localhost:8000")
    >>> view = CalendarView(client, rooms=client.fetch_rooms())
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from community.src.calendar.models import Event, Room
from config.exceptions import TransientFetchError

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

_EVENT_LIST = TypeAdapter(list[Event])
_ROOM_LIST = TypeAdapter(list[Room])


class EventsApiClient:
    """
    Read-only client for the public calendar endpoints.

    Callable as fetch_events(year, month), so an instance can be passed
    directly to CalendarView.

    Args:
        http_client: Shared HTTP client (not created or closed here)
        base_url: Gateway URL without trailing slash, "" when http_client
                  already carries a base_url
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        http_client: httpx.Client,
        base_url: str = "",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            response = self.http_client.get(
                f"{self.base_url}{path}", params=params, timeout=self.timeout
            )
        except httpx.TransportError as exc:
            logger.warning("gateway_request_failed", path=path, error=str(exc))
            raise TransientFetchError("Failed to load events") from exc

        if not response.is_success:
            logger.warning("gateway_request_rejected", path=path, status=response.status_code)
            raise TransientFetchError(f"Failed to load events (HTTP {response.status_code})")

        try:
            return response.json()
        except ValueError as exc:
            raise TransientFetchError("Failed to load events") from exc

    def fetch_month(self, year: int, month: int) -> list[Event]:
        """
        Events of one month.

        Raises:
            TransientFetchError: on network failure, non-2xx status or a
                                 malformed body
        """
        body = self._get("/api/events", params={"year": year, "month": month})
        try:
            return _EVENT_LIST.validate_python(body)
        except ValidationError as exc:
            logger.warning("gateway_response_invalid", year=year, month=month, errors=exc.error_count())
            raise TransientFetchError("Failed to load events") from exc

    __call__ = fetch_month

    def fetch_rooms(self) -> list[Room]:
        body = self._get("/api/rooms")
        try:
            return _ROOM_LIST.validate_python(body)
        except ValidationError as exc:
            raise TransientFetchError("Failed to load rooms") from exc
