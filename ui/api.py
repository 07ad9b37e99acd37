# ui/api.py
from __future__ import annotations
import logging

import requests

from hostel import config

logger = logging.getLogger("smart_hostel.client")


class ApiError(Exception):
    """A failed call to the hostel API; ``str(e)`` is the message to show."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


def safe_json(resp):
    """Decoded JSON body, or None when the body is empty or not JSON."""
    try:
        return resp.json()
    except ValueError:
        return None


class HostelApi:
    def __init__(self, base_url: str | None = None, session=None, timeout: float | None = None):
        self.base_url = (base_url if base_url is not None else config.API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = config.HTTP_TIMEOUT if timeout is None else timeout

    def _request(self, method: str, path: str, fallback: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise ApiError(f"{fallback} ({exc.__class__.__name__})") from exc
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    def get_rooms(self) -> list[dict]:
        resp = self._request("GET", "/api/rooms", "Failed to fetch rooms")
        data = safe_json(resp)
        if not resp.ok or not isinstance(data, list):
            raise ApiError("Failed to fetch rooms", resp.status_code)
        return data

    def add_room(self, payload: dict) -> dict | None:
        resp = self._request("POST", "/api/rooms", "Failed to add room", json=payload)
        data = safe_json(resp)
        if not resp.ok:
            raise ApiError(_server_message(data) or "Failed to add room", resp.status_code)
        return data

    def search_rooms(self, min_capacity, needs_ac: bool, needs_washroom: bool) -> list[dict]:
        params = {
            "minCapacity": str(min_capacity),
            "needsAC": _flag(needs_ac),
            "needsWashroom": _flag(needs_washroom),
        }
        resp = self._request("GET", "/api/rooms/search", "Failed to search rooms", params=params)
        data = safe_json(resp)
        if not resp.ok or not isinstance(data, list):
            raise ApiError("Failed to search rooms", resp.status_code)
        return data

    def allocate(self, students, needs_ac: bool, needs_washroom: bool) -> dict:
        payload = {"students": students, "needsAC": bool(needs_ac), "needsWashroom": bool(needs_washroom)}
        resp = self._request("POST", "/api/rooms/allocate", "No room available", json=payload)
        data = safe_json(resp)
        if not resp.ok:
            raise ApiError(_server_message(data) or "No room available", resp.status_code)
        return data


def _flag(v) -> str:
    return "true" if v else "false"

def _server_message(data) -> str | None:
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None
