from __future__ import annotations
import sys
from pathlib import Path
from urllib.parse import urlsplit

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hostel.store import HostelManager
from hostel_service import create_app
from ui.api import HostelApi


@pytest.fixture
def manager():
    return HostelManager(None)


@pytest.fixture
def app(manager):
    return create_app(manager)


@pytest.fixture
def client(app):
    return app.test_client()


class _FlaskResponse:
    """Just enough of requests.Response for HostelApi."""

    def __init__(self, resp):
        self._resp = resp
        self.status_code = resp.status_code
        self.ok = resp.status_code < 400

    def json(self):
        data = self._resp.get_json(silent=True)
        if data is None:
            raise ValueError("response body is not JSON")
        return data


class FlaskSession:
    """Routes HostelApi requests into a Flask test client instead of the network."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, timeout=None, params=None, json=None):
        path = urlsplit(url).path
        self.calls.append((method, path, params, json))
        resp = self.client.open(path, method=method, query_string=params, json=json)
        return _FlaskResponse(resp)


@pytest.fixture
def session(client):
    return FlaskSession(client)


@pytest.fixture
def api(session):
    return HostelApi(base_url="http://hostel.test", session=session, timeout=1)
