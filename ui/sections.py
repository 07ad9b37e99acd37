from __future__ import annotations
import streamlit as st

from .api import ApiError
from .helpers import (
    ADD_ROOM_DEFAULTS,
    SEARCH_DEFAULTS,
    get_api,
    log_line,
    format_output,
    output,
    rooms_frame,
    as_count,
    wire_number,
    validate_add_room,
    validate_allocation,
    room_added_output,
    allocation_output,
)

_TONE_BOX = {
    "success": st.success,
    "danger":  st.error,
    "warning": st.warning,
}


def render_output(out: dict | None) -> None:
    """Show an output-panel dict (title/body/tone) in a box colored by tone."""
    if not out:
        return
    box = _TONE_BOX.get(out.get("tone"), st.info)
    text = format_output(out["title"], out.get("body", ""), out.get("tone", "info"))
    box(text.replace("\n", "  \n"))


# ---------- Rooms ------------------------------------------------------------
def render_rooms_tab():
    c1, c2 = st.columns([4, 1])
    with c1:
        st.subheader("🏠 All Rooms")
    with c2:
        # a click reruns the script, which reloads the list below
        refresh = st.button("🔁 Refresh", key="refresh_rooms")

    with st.spinner("Loading…"):
        try:
            rooms = get_api().get_rooms()
        except ApiError as e:
            log_line(f"❌ load rooms: {e}")
            st.caption("Failed to load rooms.")
            return
    if refresh:
        log_line(f"🔁 refreshed room list ({len(rooms)} rooms)")

    if not rooms:
        st.caption("No rooms added yet.")
        return

    df = rooms_frame(rooms)
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button(
        "📥 Download Rooms",
        df.to_csv(index=False).encode("utf-8-sig"),
        file_name="rooms.csv",
        mime="text/csv",
    )


# ---------- Add room ---------------------------------------------------------
def _reset_add_room_form():
    for k, v in ADD_ROOM_DEFAULTS.items():
        st.session_state[k] = v

def _submit_add_room():
    room_no = (st.session_state["room_no"] or "").strip()
    capacity = st.session_state["capacity"]
    has_ac = bool(st.session_state["has_ac"])
    has_washroom = bool(st.session_state["has_washroom"])

    problem = validate_add_room(room_no, capacity)
    if problem:
        st.session_state["add_output"] = problem
        return

    n = wire_number(as_count(capacity))
    payload = {"roomNo": room_no, "capacity": n, "hasAC": has_ac, "hasAttachedWashroom": has_washroom}
    try:
        get_api().add_room(payload)
    except ApiError as e:
        log_line(f"❌ add room {room_no}: {e}")
        st.session_state["add_output"] = output("Could not add room", str(e), "danger")
        return

    log_line(f"✅ added room {room_no} (capacity {n})")
    st.session_state["add_output"] = room_added_output(room_no, n, has_ac, has_washroom)
    _reset_add_room_form()

def render_add_room_tab():
    st.subheader("➕ Add Room")
    st.text_input("Room number", key="room_no", placeholder="e.g. 105")
    st.number_input("Capacity (students)", key="capacity", value=None, step=1, placeholder="e.g. 2")
    c1, c2 = st.columns(2)
    with c1:
        st.checkbox("Air conditioning", key="has_ac")
    with c2:
        st.checkbox("Attached washroom", key="has_washroom")

    b1, b2, _ = st.columns([1, 1, 4])
    with b1:
        st.button("Add Room", type="primary", on_click=_submit_add_room, key="add_room_submit")
    with b2:
        st.button("Reset", on_click=_reset_add_room_form, key="add_room_reset")

    render_output(st.session_state.get("add_output"))


# ---------- Search -----------------------------------------------------------
def _submit_search():
    min_capacity = wire_number(st.session_state.get("min_capacity") or 1)
    needs_ac = bool(st.session_state["search_needs_ac"])
    needs_washroom = bool(st.session_state["search_needs_washroom"])
    try:
        rows = get_api().search_rooms(min_capacity, needs_ac, needs_washroom)
    except ApiError as e:
        log_line(f"❌ search: {e}")
        st.session_state["search_rows"] = None
        st.session_state["search_error"] = "Search failed."
        return
    log_line(f"🔎 search minCapacity={min_capacity} ac={needs_ac} washroom={needs_washroom}: {len(rows)} hit(s)")
    st.session_state["search_rows"] = rows
    st.session_state["search_error"] = ""

def _clear_search():
    for k, v in SEARCH_DEFAULTS.items():
        st.session_state[k] = v
    st.session_state["search_rows"] = None
    st.session_state["search_error"] = ""
    st.session_state["alloc_output"] = None

def render_search_tab():
    st.subheader("🔎 Search Rooms")
    c1, c2, c3 = st.columns([2, 1, 1])
    with c1:
        st.number_input("Minimum capacity", key="min_capacity", step=1)
    with c2:
        st.checkbox("Needs AC", key="search_needs_ac")
    with c3:
        st.checkbox("Needs attached washroom", key="search_needs_washroom")

    b1, b2, _ = st.columns([1, 1, 4])
    with b1:
        st.button("Search", type="primary", on_click=_submit_search, key="search_submit")
    with b2:
        st.button("Clear", on_click=_clear_search, key="search_clear")

    if st.session_state.get("search_error"):
        st.caption(st.session_state["search_error"])
        return
    rows = st.session_state.get("search_rows")
    if rows is None:
        return
    if not rows:
        st.caption("No rooms match these criteria.")
        return
    st.dataframe(rooms_frame(rows), use_container_width=True, hide_index=True)


# ---------- Allocate ---------------------------------------------------------
def _submit_allocation():
    students = st.session_state["students"]
    needs_ac = bool(st.session_state["alloc_needs_ac"])
    needs_washroom = bool(st.session_state["alloc_needs_washroom"])

    problem = validate_allocation(students)
    if problem:
        st.session_state["alloc_output"] = problem
        return

    n = wire_number(as_count(students))
    try:
        room = get_api().allocate(n, needs_ac, needs_washroom)
    except ApiError as e:
        log_line(f"⚠️ allocate {n} student(s): {e}")
        st.session_state["alloc_output"] = output("No room available", str(e), "danger")
        return
    log_line(f"🏷️ allocated room {(room or {}).get('roomNo')} to {n} student(s)")
    st.session_state["alloc_output"] = allocation_output(room)

def render_allocate_tab():
    st.subheader("🎯 Allocate Room")
    st.caption("Picks the smallest room that fits the group and has every required amenity.")
    st.number_input("Number of students", key="students", value=None, step=1, placeholder="e.g. 3")
    c1, c2 = st.columns(2)
    with c1:
        st.checkbox("Needs AC", key="alloc_needs_ac")
    with c2:
        st.checkbox("Needs attached washroom", key="alloc_needs_washroom")

    st.button("Allocate", type="primary", on_click=_submit_allocation, key="allocate_submit")
    render_output(st.session_state.get("alloc_output"))


# ---------- Logs --------------------------------------------------------------
def render_logs():
    if not st.session_state.get("log_lines"):
        return
    st.markdown("---")
    with st.expander("🐞 Activity Log", expanded=False):
        n = st.slider("Show last N lines", min_value=20, max_value=1000, value=200, step=20)
        tail = st.session_state["log_lines"][-n:]
        st.text_area("Log (compact)", value="\n".join(tail), height=200, label_visibility="collapsed")

        log_bytes = "\n".join(st.session_state["log_lines"]).encode("utf-8-sig")
        st.download_button("📥 Download Log", log_bytes, file_name="activity.log", mime="text/plain")
