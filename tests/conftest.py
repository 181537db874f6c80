"""Shared test fixtures for the PureFA PRTG sensor tests."""
import pytest

from purefa_sensor.config import SensorConfig

TIB = 2 ** 40


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code=200, body=None, headers=None, reason="OK"):
        self.status_code = status_code
        self._body = body
        self.headers = headers or {}
        self.reason = reason

    def json(self):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeArraySession:
    """Answers collector GETs from a path -> response (or exception) mapping."""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []
        self.logged_out = False

    def get(self, path, params=None):
        self.calls.append((path, params))
        response = self.responses[path]
        if isinstance(response, list):
            response = response.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def logout(self):
        self.logged_out = True


def items(*entries, **extra):
    body = {"items": list(entries)}
    body.update(extra)
    return FakeResponse(200, body)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep PUREFA_* variables of the machine running the tests out of the way."""
    import os
    for name in list(os.environ):
        if name.upper().startswith("PUREFA_"):
            monkeypatch.delenv(name)


@pytest.fixture
def config():
    return SensorConfig(api_token="t-123", address="array.example.com")


@pytest.fixture
def hardware_items():
    return [
        {"name": "CT0", "type": "controller", "status": "ok"},
        {"name": "CT1", "type": "controller", "status": "ok"},
        {"name": "CH0.BAY20", "type": "drive_bay", "status": "not_installed"},
        {"name": "CH0.PWR1", "type": "power_supply", "status": "failed"},
    ]


@pytest.fixture
def performance_item():
    return {
        "name": "array01",
        "writes_per_sec": 1200,
        "reads_per_sec": 3400,
        "usec_per_write_op": 2500,
        "usec_per_read_op": 2500,
    }


@pytest.fixture
def space_item():
    return {
        "name": "array01",
        "capacity": 10 * TIB,
        "space": {"unique": 3 * TIB, "total_physical": 4 * TIB, "data_reduction": 3.2},
    }


@pytest.fixture
def array_session(hardware_items, performance_item, space_item):
    return FakeArraySession({
        "hardware": items(*hardware_items),
        "arrays/performance": items(performance_item),
        "arrays/space": items(space_item),
    })
