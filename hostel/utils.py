# hostel/utils.py
from __future__ import annotations


def _norm_room(x) -> str:
    return "" if x is None else str(x).strip()

def _room_key(x) -> str:
    """Case-insensitive identity of a room number."""
    return _norm_room(x).lower()

def parse_int_safe(v, fallback: int) -> int:
    """Accept ints or integer strings ("4", " 4 "); anything else -> fallback."""
    if v is None or isinstance(v, bool):
        return fallback
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v) if v.is_integer() else fallback
    try:
        return int(str(v).strip())
    except ValueError:
        return fallback

def parse_bool_safe(v, fallback: bool) -> bool:
    """Accept real booleans or "true"/"false" (any case); anything else -> fallback."""
    if isinstance(v, bool):
        return v
    if v is None:
        return fallback
    s = str(v).strip().lower()
    if s == "true":
        return True
    if s == "false":
        return False
    return fallback
