import pytest
from fastapi.testclient import TestClient

from extrema.api import stats
from extrema.config import Settings
from extrema.main import create_app

DATA = [32, 15, -7, 10, 1000, 41, 42]

@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_ready(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"

def test_max_min_sequence(client):
    r = client.post("/max", json={"values": DATA})
    assert r.status_code == 200
    assert r.json() == {"operation": "max", "result": 1000}
    r = client.post("/min", json={"values": DATA})
    assert r.json()["result"] == -7

def test_max_min_pair(client):
    assert client.post("/max", json={"a": 2, "b": 3}).json()["result"] == 3
    assert client.post("/max", json={"a": 2.0, "b": 3.0}).json()["result"] == 3.0
    assert client.post("/min", json={"a": 2, "b": 3}).json()["result"] == 2

def test_max_needs_one_form(client):
    assert client.post("/max", json={"values": [1], "a": 1, "b": 2}).status_code == 400
    assert client.post("/max", json={"a": 1}).status_code == 400
    assert client.post("/max", json={}).status_code == 400

def test_bounds(client):
    r = client.post("/bounds", json={"values": [2, 3, 4, 5]})
    assert r.status_code == 200
    assert r.json()["result"] == [2, 5]

def test_maxk_mink(client):
    r = client.post("/maxk", json={"values": DATA, "k": 3})
    assert r.json()["result"] == [41, 42, 1000]
    r = client.post("/mink", json={"values": DATA, "k": 3})
    assert r.json()["result"] == [-7, 10, 15]

def test_maxk_out_of_range(client):
    r = client.post("/maxk", json={"values": DATA, "k": 8})
    assert r.status_code == 400
    detail = r.json()["detail"]
    assert detail["operation"] == "maxk"
    assert detail["error"] == "RangeError"
    assert "[1, 7]" in detail["message"]

def test_engine_errors(client):
    r = client.post("/bounds", json={"values": []})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "EmptyInputError"
    r = client.post("/max", json={"values": ["a", "b"]})
    assert r.json()["detail"]["error"] == "TypeError"
    r = client.post("/min", json={"values": [1, 2.5]})
    assert r.json()["detail"]["error"] == "HeterogeneousInputError"

def test_extra_fields_rejected(client):
    r = client.post("/bounds", json={"values": [1], "text": "x"})
    assert r.status_code == 400

def test_too_many_values(client, monkeypatch):
    monkeypatch.setattr(stats, "get_settings", lambda: Settings(max_values=3))
    r = client.post("/bounds", json={"values": [1, 2, 3, 4]})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "TooManyValues"

def test_metrics(client):
    client.post("/maxk", json={"values": DATA, "k": 0})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "extrema_request_total" in r.text
    assert 'extrema_engine_errors_total{operation="maxk",error="RangeError"}' in r.text

@pytest.mark.parametrize("body", [
    '{"values": [Infinity, 1.0]}',
    '{"values": [1.0, NaN]}',
    '{"values": [1e400, 1.0]}',
    '{"a": -Infinity, "b": 1.0}',
])
def test_non_finite_floats_rejected(client, body):
    r = client.post("/max", content=body, headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "TypeError"

def test_mixed_pair_with_huge_int(client):
    r = client.post("/max", json={"a": 10**400, "b": 1.5})
    assert r.status_code == 400
    assert r.json()["detail"]["error"] == "TypeError"
    r = client.post("/max", json={"a": 2**53 + 1, "b": 1.5})
    assert r.status_code == 200
    assert r.json()["result"] == float(2**53 + 1)
