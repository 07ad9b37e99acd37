import streamlit as st

# --- Ensure local packages (ui/, hostel/) are importable ---------------------
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
# -----------------------------------------------------------------------------

from ui.helpers import ensure_session_keys
from ui.sections import (
    render_rooms_tab,
    render_add_room_tab,
    render_search_tab,
    render_allocate_tab,
    render_logs,
)

st.set_page_config(
    page_title="Smart Hostel",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown(
    """
    <style>
        [data-testid="stSidebar"] { display: none; }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title("🏨 Smart Hostel Room Allocation")

# init session keys
ensure_session_keys()

rooms_tab, add_tab, search_tab, allocate_tab = st.tabs(
    ["🏠 Rooms", "➕ Add Room", "🔎 Search", "🎯 Allocate"]
)

with rooms_tab:
    render_rooms_tab()
with add_tab:
    render_add_room_tab()
with search_tab:
    render_search_tab()
with allocate_tab:
    render_allocate_tab()

render_logs()
