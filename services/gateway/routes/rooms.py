"""Room directory route, used for id -> name lookup and admin room selects."""

from fastapi import APIRouter, Depends

from community.src.adapters.room_directory import RoomDirectory
from community.src.calendar.models import Room

from ..dependencies import get_room_directory

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get("", response_model=list[Room])
async def list_rooms(rooms: RoomDirectory = Depends(get_room_directory)) -> list[Room]:
    return rooms.list_rooms()
