"""
Pytest configuration and fixtures for the WireGuard status tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.deps.status import get_timer
from app.services.dump import get_dump_command
from app.services.status.errors import ClockError, DumpCommandError
from app.utils.jwt import create_access_token


# Output of `wg show all dump` with the repeated tabs the tool emits.
BASIC_DUMP = (
    "wg0\tmDflvnauBzHrIXsLvQO1DZenjg3fOG9WbnKI0f8AB2f=\t\tTUF1fXCrEq0nrbbIFDv3RTxaLf76R+IJ9BK1MVacfkA=\t\t443\t\toff\n"
    "wg0\t\t8vrzVeNk8rhcra03o4wYGebFzJul5GCdTAmN5aPmF14=\t(none)\t(none)\t10.0.0.2/32\t\t0\t\t0\t\t0\t\t25\n"
    "wg0\t\tpcSg/lCzggscmdua73uy2k6xFQIKHi/Wdl1zBAQEnl0=\t\t(none)\t88.55.42.162:36518\t\t10.0.0.3/32\t\t1661801925\t1384400\t5605560\t\t25\n"
    "wg0\t\tFGbKv7F4rkIWl9gcc2P63JFO4zStX0Wk1A1Jr5/9qE8=\t\t(none)\t88.55.42.162:63801\t\t10.0.0.5/32\t\t1661695518\t4823836\t28528792\t\t25\n"
    "wg0\t\tLFKagB3/g8izSKU4w10otbbsfJMtjI4xSy8mvlXHOik=\t\t(none)\t38.111.111.111:8114\t\t10.0.0.6/32\t\t1661801952\t27229092\t\t55471340\t25\n"
)

# One local and one remote peer, handshake at 1662886827.
SMALL_DUMP = (
    "wg0\t4BotR9fetxxxXGxG1/7x400TiMrZMvgCPwR5YFPQAAB=\t8vrzVeNk11111103oqwYGe1111111GCdTAoN5999A99=\t4339\toff\n"
    "wg0\t21189XCAEq0lrbbIFDv2RTxaLf76R+IJ5BAAAAAAAAA=\t(none)\t9.8.7.6:39879\t0.0.0.0/0\t1662886827\t11536\t17808\t25\n"
)

SMALL_STATUS_ALIVE = (
    "Interface: wg0\n"
    "Endpoints:\n"
    "\tLocal:\n"
    "\t\tPublic key: 4BotR9fetxxxXGxG1/7x400TiMrZMvgCPwR5YFPQAAB=\n"
    "\t\tPort: 4339\n"
    "\tRemote:\n"
    "\t\tIP: 9.8.7.6\n"
    "\t\tSend bytes: 17808\n"
    "\t\tReceived bytes: 11536\n"
    "\t\tLatest handshake: 10s ✅"
)

NOW = 1662886837


class FixedTimer:
    """Clock stub that always returns the same time."""

    def __init__(self, seconds: int):
        self.seconds = seconds
        self.calls = 0

    def seconds_since_epoch(self) -> int:
        self.calls += 1
        return self.seconds


class BrokenTimer:
    def seconds_since_epoch(self) -> int:
        raise ClockError("clock is gone")


class FakeDumpCommand:
    """Dump source returning canned text."""

    def __init__(self, output: str):
        self.output = output

    def execute_dump(self) -> str:
        return self.output


class FailingDumpCommand:
    def execute_dump(self) -> str:
        raise DumpCommandError("wg not found")


@pytest.fixture
def timer():
    return FixedTimer(NOW)


@pytest.fixture
def small_dump():
    return FakeDumpCommand(SMALL_DUMP)


@pytest.fixture
def access_token():
    return create_access_token(sub="admin", roles=["admin"])


@pytest.fixture
def auth_headers(access_token):
    return {"Authorization": f"Bearer {access_token}"}


@pytest.fixture
def api():
    """FastAPI app with the dump source and clock replaced by stubs."""
    from app.main import app

    state = {"command": FakeDumpCommand(SMALL_DUMP)}
    app.dependency_overrides[get_dump_command] = lambda: state["command"]
    app.dependency_overrides[get_timer] = lambda: FixedTimer(NOW)
    try:
        yield app, state
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(api):
    app, _ = api
    return TestClient(app)
