"""Room directory - the community center's bookable spaces, looked up by id."""

from __future__ import annotations

from typing import Iterable, Iterator

from community.src.calendar.models import Room


class RoomDirectory:
    """Read-only id -> Room lookup used for display and reference checks."""

    def __init__(self, rooms: Iterable[Room] = ()) -> None:
        self._rooms: dict[int, Room] = {}
        for room in rooms:
            if room.id in self._rooms:
                raise ValueError(f"Duplicate room id: {room.id}")
            self._rooms[room.id] = room

    def get(self, room_id: int) -> Room | None:
        return self._rooms.get(room_id)

    def list_rooms(self) -> list[Room]:
        return sorted(self._rooms.values(), key=lambda room: room.id)

    def as_mapping(self) -> dict[int, Room]:
        return dict(self._rooms)

    def __contains__(self, room_id: object) -> bool:
        return room_id in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(self.list_rooms())

    def __len__(self) -> int:
        return len(self._rooms)
