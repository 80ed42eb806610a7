from typing import List, Optional

from ..errors import RoomNotFoundError
from ..models import Room


class Map:
    """Rooms in the order they were discovered. Rooms are only ever appended."""

    def __init__(self, rooms: Optional[List[Room]] = None):
        self.rooms: List[Room] = list(rooms or [])

    @property
    def room_count(self) -> int:
        return len(self.rooms)

    def add_room(self, room: Room) -> None:
        self.rooms.append(room)

    def __contains__(self, room) -> bool:
        return any(known is room for known in self.rooms)

    def index_of(self, room: Room) -> int:
        for index, known in enumerate(self.rooms):
            if known is room:
                return index
        raise RoomNotFoundError("Room not found in the map.")

    def last_room(self, room: Room) -> Optional[Room]:
        index = self.index_of(room)
        return self.rooms[index - 1] if index > 0 else None

    def next_room(self, room: Room) -> Optional[Room]:
        index = self.index_of(room)
        return self.rooms[index + 1] if index < len(self.rooms) - 1 else None

    def newest_room(self) -> Optional[Room]:
        return self.rooms[-1] if self.rooms else None

    def get_map(self, current_room: Room) -> str:
        self.index_of(current_room)
        return "".join("[|]" if room is current_room else "[]" for room in self.rooms)
