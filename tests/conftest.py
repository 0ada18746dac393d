"""
Shared fixtures: a scripted stand-in for requests.Session and a fake clock.
"""
import json
import threading
import time
from http.client import responses as http_reasons
from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest
import requests

from stagedoor.api_client import ApiClient
from stagedoor.session import MemoryTokenStore, Navigator

BASE_URL = "http://api.test"
REFRESH_URL = f"{BASE_URL}/api/admin/auth/refresh"


def make_response(
    status_code: int = 200,
    body: Any = None,
    url: str = BASE_URL,
    raw: Optional[bytes] = None,
) -> requests.Response:
    """Build a real requests.Response carrying a JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = http_reasons.get(status_code, "")
    response.url = url
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    elif body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


def ok(data: Any = None, status_code: int = 200) -> requests.Response:
    return make_response(status_code, {"success": True, "data": data})


def fail(error: str, status_code: int = 400) -> requests.Response:
    return make_response(status_code, {"success": False, "error": error})


class FakeSession:
    """
    Stands in for requests.Session.

    Replies are queued per (method, url). Each call consumes the next reply;
    the last one repeats. A reply may be a Response, an exception instance
    (raised), or a callable taking the recorded call and returning either.
    """

    def __init__(self):
        self.calls: List[Dict[str, Any]] = []
        self._replies: Dict[Tuple[str, str], List[Any]] = {}
        self._lock = threading.Lock()

    def add(self, method: str, path: str, *replies: Any) -> None:
        url = path if path.startswith("http") else f"{BASE_URL}{path}"
        self._replies[(method.upper(), url)] = list(replies)

    def request(self, method, url, headers=None, json=None, files=None, timeout=None, **kwargs):
        call = {
            "method": method.upper(),
            "url": url,
            "headers": dict(headers or {}),
            "json": json,
            "files": files,
            "timeout": timeout,
        }
        with self._lock:
            self.calls.append(call)
            queue = self._replies.get((call["method"], url))
            if not queue:
                raise AssertionError(f"Unexpected request: {method} {url}")
            reply = queue.pop(0) if len(queue) > 1 else queue[0]

        if callable(reply):
            reply = reply(call)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    def calls_to(self, method: str, path: str) -> List[Dict[str, Any]]:
        url = path if path.startswith("http") else f"{BASE_URL}{path}"
        with self._lock:
            return [c for c in self.calls if c["method"] == method.upper() and c["url"] == url]

    def count(self, method: str, path: str) -> int:
        return len(self.calls_to(method, path))


class FakeClock:
    """Manually advanced monotonic clock, in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> None:
    """Poll until predicate() holds; fail the test otherwise."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return
        time.sleep(0.005)
    raise AssertionError("condition not met in time")


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_store():
    return MemoryTokenStore("old-token")


@pytest.fixture
def redirects():
    return []


@pytest.fixture
def navigator(redirects):
    return Navigator(current_path="/admin/clients", on_redirect=redirects.append)


@pytest.fixture
def client(session, clock, token_store, navigator):
    return ApiClient(
        base_url=BASE_URL,
        token_store=token_store,
        navigator=navigator,
        session=session,
        clock=clock,
        is_development=True,
        dev_server_url="http://localhost:3001",
    )
