from __future__ import annotations
import math
from datetime import datetime as dt

import streamlit as st
import pandas as pd

from .api import HostelApi

# ----------------- Session helpers -----------------

# widget keys -> the value a reset puts back
SEARCH_DEFAULTS = {
    "min_capacity":          1,
    "search_needs_ac":       False,
    "search_needs_washroom": False,
}

ADD_ROOM_DEFAULTS = {
    "room_no":      "",
    "capacity":     None,
    "has_ac":       False,
    "has_washroom": False,
}

def ensure_session_keys() -> None:
    """Create all session_state keys used by the app if missing."""
    defaults = [
        ("api",          None),
        ("add_output",   None),
        ("search_rows",  None),
        ("search_error", ""),
        ("alloc_output", None),
        ("log_lines",    []),
        ("min_capacity", SEARCH_DEFAULTS["min_capacity"]),
    ]
    for k, v in defaults:
        if k not in st.session_state:
            st.session_state[k] = v
    if st.session_state["api"] is None:
        st.session_state["api"] = HostelApi()

def get_api() -> HostelApi:
    ensure_session_keys()
    return st.session_state["api"]

def log_line(msg: str) -> None:
    """Append a timestamped line to the in-app activity log."""
    stamp = dt.now().strftime("%H:%M:%S")
    st.session_state.setdefault("log_lines", []).append(f"{stamp} {msg}")

# ----------------- Formatting -----------------

TONE_LABELS = {
    "success": "SUCCESS",
    "danger":  "ERROR",
    "warning": "NOTICE",
}

def format_output(title: str, body: str = "", tone: str = "info") -> str:
    """Output-panel text: '<TONE>: <title>' then a blank line and the body."""
    label = TONE_LABELS.get(tone, "INFO")
    return f"{label}: {title}\n\n{body or ''}".strip()

def output(title: str, body: str = "", tone: str = "info") -> dict:
    return {"title": title, "body": body, "tone": tone}

def badge_yes_no(v) -> str:
    return "Yes" if v else "No"

ROOM_COLUMNS = ["Room No", "Capacity", "AC", "Washroom"]

def rooms_frame(rooms: list[dict]) -> pd.DataFrame:
    """Rooms from the API as a display table (amenities shown as Yes/No)."""
    if not rooms:
        return pd.DataFrame(columns=ROOM_COLUMNS)
    df = pd.DataFrame(rooms)
    for col in ["roomNo", "capacity", "hasAC", "hasAttachedWashroom"]:
        if col not in df.columns:
            df[col] = None
    out = pd.DataFrame({
        "Room No":  df["roomNo"].astype(str),
        "Capacity": df["capacity"],
        "AC":       df["hasAC"].map(badge_yes_no),
        "Washroom": df["hasAttachedWashroom"].map(badge_yes_no),
    })
    return out.reset_index(drop=True)

# ----------------- Validation -----------------

def as_count(raw) -> float | None:
    """Number typed into a count field, or None when blank / not a finite number."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        n = float(str(raw).strip())
    except ValueError:
        return None
    return n if math.isfinite(n) else None

def wire_number(n: float):
    return int(n) if float(n).is_integer() else n

def validate_add_room(room_no: str, capacity) -> dict | None:
    """NOTICE output for an invalid add-room form, None when it can be submitted."""
    if not (room_no or "").strip():
        return output(
            "Room number is required",
            "Please enter a room number (e.g. 105).",
            "warning",
        )
    n = as_count(capacity)
    if n is None or n < 1:
        return output(
            "Capacity must be at least 1",
            "Please enter a valid number of students.",
            "warning",
        )
    return None

def validate_allocation(students) -> dict | None:
    n = as_count(students)
    if n is None or n < 1:
        return output(
            "Students must be at least 1",
            "Please enter a valid number of students.",
            "warning",
        )
    return None

def room_added_output(room_no: str, capacity, has_ac: bool, has_washroom: bool) -> dict:
    return output(
        f"Room {room_no} added",
        f"Capacity: {wire_number(capacity)}\nAC: {badge_yes_no(has_ac)}\nWashroom: {badge_yes_no(has_washroom)}",
        "success",
    )

def allocation_output(room: dict) -> dict:
    room = room or {}
    body = (
        f"Room: {room.get('roomNo')}\n"
        f"Capacity: {room.get('capacity')}\n"
        f"AC: {badge_yes_no(room.get('hasAC'))}\n"
        f"Washroom: {badge_yes_no(room.get('hasAttachedWashroom'))}\n\n"
        "Algorithm: selected the smallest capacity room meeting all requirements."
    )
    return output("Room allocated (smallest fit)", body, "success")


__all__ = [
    "ensure_session_keys",
    "get_api",
    "log_line",
    "format_output",
    "output",
    "badge_yes_no",
    "rooms_frame",
    "as_count",
    "wire_number",
    "validate_add_room",
    "validate_allocation",
    "room_added_output",
    "allocation_output",
]
