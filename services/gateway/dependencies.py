"""App state accessors shared by the gateway routers."""

from fastapi import HTTPException, Request

from community.src.adapters.event_store import EventRepository
from community.src.adapters.room_directory import RoomDirectory


def get_event_repository(request: Request) -> EventRepository:
    repository: EventRepository | None = getattr(request.app.state, "event_repository", None)
    if repository is None:
        raise HTTPException(status_code=500, detail="Event store not initialized")
    return repository


def get_room_directory(request: Request) -> RoomDirectory:
    return get_event_repository(request).rooms
