import json

import requests

from services import ha_states


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")

    def json(self):
        return self._payload


PAYLOAD = [
    {"entity_id": "sensor.home_power", "state": "482.7", "attributes": {"unit_of_measurement": "W"}},
    {"entity_id": "sensor.battery_power", "state": "unavailable"},
    {"state": "orphan"},
    "garbage",
]


def test_flatten_states_skips_malformed_items():
    assert ha_states.flatten_states(PAYLOAD) == {
        "sensor.home_power": "482.7",
        "sensor.battery_power": "unavailable",
    }
    assert ha_states.flatten_states({"not": "a list"}) == {}


def test_fetch_states_sends_token(monkeypatch):
    seen = {}

    def fake_get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse(PAYLOAD)

    monkeypatch.setattr(requests, "get", fake_get)
    assert ha_states.fetch_states("http://ha:8123/", "secret") == PAYLOAD
    assert seen["url"] == "http://ha:8123/api/states"
    assert seen["headers"]["Authorization"] == "Bearer secret"


def test_load_snapshot_connection_error(monkeypatch):
    def fake_get(*args, **kwargs):
        raise requests.exceptions.ConnectionError()

    monkeypatch.setattr(requests, "get", fake_get)
    snapshot = ha_states.load_snapshot("http://ha:8123")
    assert len(snapshot) == 0


def test_load_snapshot_http_error(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda *a, **k: FakeResponse([], status_code=401))
    assert len(ha_states.load_snapshot("http://ha:8123", "bad")) == 0


def test_main_prints_resolved_readings(monkeypatch, capsys):
    monkeypatch.setattr(requests, "get", lambda *a, **k: FakeResponse(PAYLOAD))
    rc = ha_states.main(["sensor.home_power", "sensor.battery_power", "--url", "http://ha:8123"])
    assert rc == 0
    out = json.loads(capsys.readouterr().out)
    assert out["readings"] == {"sensor.home_power": 482.7, "sensor.battery_power": None}
