"""
Shared pytest fixtures for the community center calendar tests.

- seed_config: rooms + annual events from config/seed.yaml
- repository: empty Event Store over in-memory storage
- seeded_repository: Event Store after the 2025 seed
- make_event: builder for stored Event records without a repository
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from community.src.adapters.event_store import EventRepository, InMemoryEventStorage
from community.src.adapters.room_directory import RoomDirectory
from community.src.calendar.models import Event
from community.src.calendar.recurrence import seed_events
from community.src.calendar.seed_config import SeedConfig, load_seed_config

SEED_YEAR = 2025


@pytest.fixture(scope="session")
def seed_config() -> SeedConfig:
    return load_seed_config()


@pytest.fixture
def room_directory(seed_config: SeedConfig) -> RoomDirectory:
    return RoomDirectory(seed_config.rooms)


@pytest.fixture
def repository(room_directory: RoomDirectory) -> EventRepository:
    """Empty Event Store with the seven community center rooms."""
    return EventRepository(storage=InMemoryEventStorage(), rooms=room_directory)


@pytest.fixture
def seeded_repository(repository: EventRepository, seed_config: SeedConfig) -> EventRepository:
    seed_events(repository, SEED_YEAR, seed_config)
    return repository


@pytest.fixture
def event_payload() -> dict[str, Any]:
    """Valid admin form payload (wire field names)."""
    return {
        "title": "Test Event",
        "description": "Event created from the admin form",
        "date": "2025-05-10",
        "startTime": "10:00",
        "endTime": "11:00",
        "roomId": 2,
        "category": "Classes",
    }


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Build a stored Event directly (ids auto-increment per test)."""
    counter = {"id": 0}

    def _make(date: str, title: str = "Event", **overrides: Any) -> Event:
        counter["id"] += 1
        fields: dict[str, Any] = {
            "id": counter["id"],
            "title": title,
            "description": f"{title} description",
            "date": date,
            "start_time": "10:00",
            "end_time": "11:00",
            "room_id": 1,
            "category": "Classes",
        }
        fields.update(overrides)
        return Event(**fields)

    return _make
