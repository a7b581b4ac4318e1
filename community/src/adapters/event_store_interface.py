"""
Alnwick Community Center - Abstract storage interface for events.

The EventRepository holds the business rules (validation, id assignment,
month filtering); an EventStorage backend only keeps records keyed by id.
Swapping the in-memory backend for a database means adding a class that
implements every @abstractmethod here and a case in get_event_storage().

Usage:
    from community.src.adapters.event_store import EventRepository, get_event_storage

    repository = EventRepository(storage=get_event_storage("memory"), rooms=rooms)
"""

from abc import ABC, abstractmethod
from typing import Iterator

from community.src.calendar.models import Event


class EventStorage(ABC):
    """Record storage keyed by event id. Synchronous, no partial writes."""

    @abstractmethod
    def next_id(self) -> int:
        """
        Reserve and return the next event id.

        Ids are never reused, even after delete.
        """

    @abstractmethod
    def get(self, event_id: int) -> Event | None:
        """Return the stored event, None if absent."""

    @abstractmethod
    def put(self, event: Event) -> None:
        """Insert or replace the record stored under event.id."""

    @abstractmethod
    def remove(self, event_id: int) -> bool:
        """Delete a record. Returns False if it did not exist."""

    @abstractmethod
    def iter_events(self) -> Iterator[Event]:
        """Iterate over all records in insertion order."""

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_events())
