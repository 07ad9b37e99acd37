# hostel/store.py
from __future__ import annotations
import json
import logging
import os
import threading
from typing import List, Optional

from .models import Room, SAMPLE_ROOMS
from .utils import _norm_room, _room_key

logger = logging.getLogger("smart_hostel.store")


class HostelManager:
    """In-memory room inventory, mirrored to a JSON file after every change.

    ``db_path=None`` keeps everything in memory (used by tests and what-if runs).
    """

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path
        self._rooms: List[Room] = []
        self._lock = threading.RLock()
        if not self._load_from_disk():
            self._rooms.extend(SAMPLE_ROOMS)
            logger.info("Seeded %d sample rooms.", len(SAMPLE_ROOMS))
            self._save_to_disk()

    # ---- operations ----

    def add_room(self, room_no: str, capacity: int, has_ac: bool, has_washroom: bool) -> bool:
        r_no = _norm_room(room_no)
        with self._lock:
            if not r_no or capacity <= 0:
                logger.info("Rejected room %r (capacity=%s): invalid.", r_no, capacity)
                return False
            if any(_room_key(r.room_no) == _room_key(r_no) for r in self._rooms):
                logger.info("Rejected room %r: number already exists.", r_no)
                return False
            self._rooms.append(Room(r_no, int(capacity), bool(has_ac), bool(has_washroom)))
            self._save_to_disk()
        logger.info("Added room %s (capacity=%s, ac=%s, washroom=%s).", r_no, capacity, has_ac, has_washroom)
        return True

    def get_all_rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms)

    def search_rooms(self, min_capacity: int, require_ac: bool, require_washroom: bool) -> List[Room]:
        with self._lock:
            hits = [
                r for r in self._rooms
                if r.capacity >= min_capacity
                and (not require_ac or r.has_ac)
                and (not require_washroom or r.has_attached_washroom)
            ]
        return sorted(hits, key=lambda r: (r.capacity, r.room_no))

    def allocate_room(self, students: int, needs_ac: bool, needs_washroom: bool) -> Optional[Room]:
        """Smallest-capacity room that fits ``students`` and has the required amenities."""
        candidates = self.search_rooms(students, needs_ac, needs_washroom)
        if not candidates:
            logger.info("No room for %d student(s) (ac=%s, washroom=%s).", students, needs_ac, needs_washroom)
            return None
        room = candidates[0]
        logger.info("Allocated room %s (capacity=%d) for %d student(s).", room.room_no, room.capacity, students)
        return room

    # ---- persistence ----

    def _load_from_disk(self) -> bool:
        if not self.db_path or not os.path.exists(self.db_path):
            return False
        try:
            with open(self.db_path, "r", encoding="utf-8") as fh:
                raw = fh.read().strip()
            if not raw:
                return False
            data = json.loads(raw)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s: %s", self.db_path, exc)
            return False
        if not isinstance(data, list):
            logger.warning("Ignoring %s: expected a JSON array.", self.db_path)
            return False

        loaded = [r for r in (Room.from_json(item) for item in data) if r is not None]
        if not loaded:
            return False
        self._rooms = loaded
        logger.info("Loaded %d room(s) from %s.", len(loaded), self.db_path)
        return True

    def _save_to_disk(self) -> None:
        if not self.db_path:
            return
        tmp = f"{self.db_path}.tmp"
        try:
            parent = os.path.dirname(self.db_path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump([r.to_json() for r in self._rooms], fh)
            os.replace(tmp, self.db_path)
        except OSError as exc:
            logger.error("Could not save rooms to %s: %s", self.db_path, exc)
