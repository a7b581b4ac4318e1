"""
Alnwick Community Center - Event repository over injectable storage.

Backend Day 1: in-process memory (dict keyed by id). Admin-entered events are
lost on restart; seed events are regenerated at startup.

All operations are synchronous and either fully apply or raise:
    - EventValidationError: missing/malformed fields, unknown room
    - EventNotFoundError: get/update on an unknown id
delete_event() returns False for an unknown id instead of raising.
"""

from __future__ import annotations

import os
from datetime import date
from typing import Any, Iterator, Mapping

import structlog
from pydantic import ValidationError

from community.src.adapters.event_store_interface import EventStorage
from community.src.adapters.room_directory import RoomDirectory
from community.src.calendar.models import Event, EventInput
from config.exceptions import EventNotFoundError, EventValidationError

logger = structlog.get_logger(__name__)

# Wire field name -> label used in field-level messages
FIELD_LABELS: dict[str, str] = {
    "title": "Title",
    "description": "Description",
    "date": "Date",
    "startTime": "Start time",
    "endTime": "End time",
    "roomId": "Room",
    "category": "Category",
}


class InMemoryEventStorage(EventStorage):
    """Dict-backed storage. Insertion order is preserved across replace."""

    def __init__(self) -> None:
        self._events: dict[int, Event] = {}
        self._last_id = 0

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def get(self, event_id: int) -> Event | None:
        return self._events.get(event_id)

    def put(self, event: Event) -> None:
        self._events[event.id] = event
        self._last_id = max(self._last_id, event.id)

    def remove(self, event_id: int) -> bool:
        return self._events.pop(event_id, None) is not None

    def iter_events(self) -> Iterator[Event]:
        return iter(list(self._events.values()))

    def __len__(self) -> int:
        return len(self._events)


def _format_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "body"
        label = FIELD_LABELS.get(field, field)
        if err["type"] == "missing" or "must not be blank" in err["msg"]:
            message = f"{label} is required"
        else:
            message = f"{label}: {err['msg']}"
        errors.setdefault(field, message)
    return errors


class EventRepository:
    """
    Event Store: CRUD and month-scoped queries over an EventStorage.

    The room directory is injected so room references can be resolved on
    create/update.
    """

    def __init__(self, storage: EventStorage, rooms: RoomDirectory) -> None:
        self.storage = storage
        self.rooms = rooms

    # ============================================================
    # Validation
    # ============================================================

    def validate(self, fields: EventInput | Mapping[str, Any]) -> EventInput:
        """
        Validate an event payload (wire camelCase or snake_case keys).

        Raises:
            EventValidationError: with one message per invalid field
        """
        if isinstance(fields, EventInput):
            data = fields
        else:
            try:
                data = EventInput.model_validate(
                    dict(fields) if isinstance(fields, Mapping) else fields
                )
            except ValidationError as exc:
                errors = _format_errors(exc)
                raise EventValidationError(
                    "Validation failed: " + "; ".join(errors.values()), errors
                ) from exc

        if data.room_id not in self.rooms:
            message = f"Room {data.room_id} does not exist"
            raise EventValidationError(message, {"roomId": message})

        return data

    # ============================================================
    # Queries
    # ============================================================

    def list_events(self) -> list[Event]:
        return list(self.storage.iter_events())

    def get_event(self, event_id: int) -> Event:
        event = self.storage.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def list_events_for_month(self, year: int, month: int) -> list[Event]:
        """
        Events whose local date falls in the given month.

        Args:
            year: Full year (ex: 2025)
            month: 1-12

        Raises:
            ValueError: if month is outside 1-12
        """
        if not 1 <= month <= 12:
            raise ValueError(f"month must be 1-12, got {month}")
        return [
            event
            for event in self.storage.iter_events()
            if (event.local_date().year, event.local_date().month) == (year, month)
        ]

    def list_upcoming_events(self, today: date | None = None, limit: int = 5) -> list[Event]:
        """Events on or after today, soonest first, at most limit."""
        today = today or date.today()
        upcoming = [e for e in self.storage.iter_events() if e.local_date() >= today]
        upcoming.sort(key=lambda e: (e.local_date(), e.start_time))
        return upcoming[:limit]

    def find_duplicate(self, data: EventInput) -> Event | None:
        """Existing event with the same title, date, start time and room."""
        key = (data.title, data.date, data.start_time, data.room_id)
        for event in self.storage.iter_events():
            if event.natural_key() == key:
                return event
        return None

    def count(self) -> int:
        return len(self.storage)

    # ============================================================
    # Mutations
    # ============================================================

    def create_event(self, fields: EventInput | Mapping[str, Any]) -> Event:
        data = self.validate(fields)
        event = Event.from_input(self.storage.next_id(), data)
        self.storage.put(event)
        logger.info("event_created", event_id=event.id, date=event.date, room_id=event.room_id)
        return event

    def update_event(self, event_id: int, fields: EventInput | Mapping[str, Any]) -> Event:
        """Full replacement of every field except the id."""
        if self.storage.get(event_id) is None:
            raise EventNotFoundError(event_id)
        data = self.validate(fields)
        event = Event.from_input(event_id, data)
        self.storage.put(event)
        logger.info("event_updated", event_id=event_id, date=event.date)
        return event

    def delete_event(self, event_id: int) -> bool:
        deleted = self.storage.remove(event_id)
        if deleted:
            logger.info("event_deleted", event_id=event_id)
        else:
            logger.debug("event_delete_missing", event_id=event_id)
        return deleted


def get_event_storage(provider: str | None = None) -> EventStorage:
    """
    Factory for the storage backend.

    Args:
        provider: "memory" (only backend so far). If None, read from
                  EVENT_STORAGE_PROVIDER (default "memory").

    Raises:
        ValueError: if provider is unknown
    """
    provider = provider or os.getenv("EVENT_STORAGE_PROVIDER", "memory")

    if provider == "memory":
        return InMemoryEventStorage()

    raise ValueError(f"Unknown event storage provider: {provider}")
