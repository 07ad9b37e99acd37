# hostel/models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .utils import _norm_room, parse_int_safe, parse_bool_safe


@dataclass(frozen=True)
class Room:
    room_no: str
    capacity: int
    has_ac: bool = False
    has_attached_washroom: bool = False

    def to_json(self) -> dict:
        """Wire shape used by the HTTP API (camelCase keys)."""
        return {
            "roomNo": self.room_no,
            "capacity": self.capacity,
            "hasAC": self.has_ac,
            "hasAttachedWashroom": self.has_attached_washroom,
        }

    @classmethod
    def from_json(cls, data: dict) -> Optional["Room"]:
        """Build a Room from a wire mapping; None when number or capacity is invalid."""
        if not isinstance(data, dict):
            return None
        room_no = _norm_room(data.get("roomNo", ""))
        capacity = parse_int_safe(data.get("capacity"), -1)
        if not room_no or capacity <= 0:
            return None
        return cls(
            room_no=room_no,
            capacity=capacity,
            has_ac=parse_bool_safe(data.get("hasAC"), False),
            has_attached_washroom=parse_bool_safe(data.get("hasAttachedWashroom"), False),
        )


SAMPLE_ROOMS = [
    Room("101", 1, True,  True),
    Room("102", 2, False, True),
    Room("103", 4, True,  False),
    Room("104", 2, True,  True),
    Room("201", 6, False, False),
]
