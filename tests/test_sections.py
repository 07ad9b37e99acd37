import pytest
import requests
from streamlit.testing.v1 import AppTest

from ui.api import HostelApi


class _DownSession:
    """A requests-like session whose server is unreachable."""

    def request(self, method, url, **kwargs):
        raise requests.ConnectionError("refused")


def _start(api):
    at = AppTest.from_file("../app.py", default_timeout=10)
    at.session_state["api"] = api
    at.run()
    assert not at.exception
    return at

def _captions(at):
    return [c.value for c in at.caption]


@pytest.fixture
def down_api():
    return HostelApi("http://hostel.test", session=_DownSession(), timeout=1)


# ---------- Rooms ------------------------------------------------------------
def test_rooms_tab_lists_every_room(api):
    at = _start(api)
    rooms = at.dataframe[0].value
    assert list(rooms["Room No"]) == ["101", "102", "103", "104", "201"]
    assert list(rooms["AC"]) == ["Yes", "No", "Yes", "Yes", "No"]


def test_rooms_tab_when_the_api_is_down(down_api):
    at = _start(down_api)
    assert "Failed to load rooms." in _captions(at)
    assert len(at.dataframe) == 0


# ---------- Add room ---------------------------------------------------------
def test_successful_add_clears_the_form_and_lists_the_room(api):
    at = _start(api)
    at.text_input(key="room_no").input("105")
    at.number_input(key="capacity").set_value(3)
    at.checkbox(key="has_ac").check()
    at.button(key="add_room_submit").click().run()

    assert not at.exception
    assert at.success[0].value.startswith("SUCCESS: Room 105 added")
    assert at.text_input(key="room_no").value == ""
    assert at.number_input(key="capacity").value is None
    assert at.checkbox(key="has_ac").value is False
    assert list(at.dataframe[0].value["Room No"])[-1] == "105"


def test_failed_add_keeps_the_input(down_api):
    at = _start(down_api)
    at.text_input(key="room_no").input("999")
    at.number_input(key="capacity").set_value(2)
    at.button(key="add_room_submit").click().run()

    assert at.error[0].value.startswith("ERROR: Could not add room")
    assert "Failed to add room" in at.error[0].value
    assert at.text_input(key="room_no").value == "999"
    assert at.number_input(key="capacity").value == 2


def test_duplicate_room_shows_server_message(api):
    at = _start(api)
    at.text_input(key="room_no").input("101")
    at.number_input(key="capacity").set_value(2)
    at.button(key="add_room_submit").click().run()

    assert "Room number already exists (or invalid)." in at.error[0].value
    assert at.text_input(key="room_no").value == "101"


def test_add_without_room_number_is_a_notice(api, session):
    at = _start(api)
    calls_before = len(session.calls)
    at.number_input(key="capacity").set_value(2)
    at.button(key="add_room_submit").click().run()

    assert at.warning[0].value.startswith("NOTICE: Room number is required")
    # only the room list reload hit the API
    assert [c[:2] for c in session.calls[calls_before:]] == [("GET", "/api/rooms")]


def test_reset_clears_the_form(api):
    at = _start(api)
    at.text_input(key="room_no").input("777")
    at.checkbox(key="has_washroom").check()
    at.button(key="add_room_reset").click().run()

    assert at.text_input(key="room_no").value == ""
    assert at.checkbox(key="has_washroom").value is False


# ---------- Search -----------------------------------------------------------
def test_search_results(api):
    at = _start(api)
    at.number_input(key="min_capacity").set_value(2)
    at.checkbox(key="search_needs_ac").check()
    at.button(key="search_submit").click().run()

    results = at.dataframe[1].value
    assert list(results["Room No"]) == ["104", "103"]


def test_search_without_matches(api):
    at = _start(api)
    at.number_input(key="min_capacity").set_value(7)
    at.button(key="search_submit").click().run()

    assert "No rooms match these criteria." in _captions(at)
    assert len(at.dataframe) == 1


def test_search_failure(down_api):
    at = _start(down_api)
    at.button(key="search_submit").click().run()
    assert "Search failed." in _captions(at)


def test_clear_resets_search_and_allocation_output(api):
    at = _start(api)
    at.number_input(key="min_capacity").set_value(3)
    at.button(key="search_submit").click().run()
    at.number_input(key="students").set_value(2)
    at.button(key="allocate_submit").click().run()
    assert len(at.dataframe) == 2
    assert at.session_state["alloc_output"] is not None

    at.button(key="search_clear").click().run()

    assert not at.exception
    assert at.number_input(key="min_capacity").value == 1
    assert at.checkbox(key="search_needs_ac").value is False
    assert len(at.dataframe) == 1
    assert at.session_state["search_rows"] is None
    assert at.session_state["alloc_output"] is None
    assert len(at.success) == 0


# ---------- Allocate ---------------------------------------------------------
def test_allocation_shows_smallest_fit(api):
    at = _start(api)
    at.number_input(key="students").set_value(2)
    at.checkbox(key="alloc_needs_ac").check()
    at.checkbox(key="alloc_needs_washroom").check()
    at.button(key="allocate_submit").click().run()

    text = at.success[0].value
    assert text.startswith("SUCCESS: Room allocated (smallest fit)")
    assert "Room: 104" in text
    assert "Algorithm: selected the smallest capacity room meeting all requirements." in text


def test_allocation_without_a_fit(api):
    at = _start(api)
    at.number_input(key="students").set_value(50)
    at.button(key="allocate_submit").click().run()

    assert at.error[0].value.startswith("ERROR: No room available")


def test_allocation_needs_a_student_count(api):
    at = _start(api)
    at.button(key="allocate_submit").click().run()
    assert at.warning[0].value.startswith("NOTICE: Students must be at least 1")


def test_activity_log_records_actions(api):
    at = _start(api)
    at.number_input(key="students").set_value(1)
    at.button(key="allocate_submit").click().run()
    assert any("allocated room 101" in line for line in at.session_state["log_lines"])
