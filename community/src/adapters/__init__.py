"""Alnwick Community Center - Adapters Package

Storage adapters behind the Event Store. Swapping the backend means adding an
EventStorage implementation and a case in get_event_storage().

Available adapters:
    - event_store.InMemoryEventStorage: dict-backed, process lifetime
    - room_directory.RoomDirectory: read-only room lookup
    - events_api.EventsApiClient: HTTP reads for calendar views
"""

from community.src.adapters.event_store import (
    EventRepository,
    InMemoryEventStorage,
    get_event_storage,
)
from community.src.adapters.event_store_interface import EventStorage
from community.src.adapters.events_api import EventsApiClient
from community.src.adapters.room_directory import RoomDirectory

__all__ = [
    "EventRepository",
    "EventStorage",
    "EventsApiClient",
    "InMemoryEventStorage",
    "RoomDirectory",
    "get_event_storage",
]
