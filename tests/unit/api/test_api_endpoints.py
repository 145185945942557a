from unittest.mock import MagicMock

import fakeredis
import pytest
import redis
from fastapi.testclient import TestClient
from tracker_reader.infrastructure.redis.reader import CounterReader
from tracker_reader.main import app


@pytest.fixture
def store():
    return fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)


@pytest.fixture
def client(store):
    # Lifespan is not run without a context manager; wire state by hand
    app.state.redis = store
    app.state.reader = CounterReader(store, 42)
    yield TestClient(app)
    app.state.reader = None
    app.state.redis = None


def test_day_counts(client, store):
    store.set("trk_42:signup:day:20240115:env:all:counts", "17")
    resp = client.get("/counts/day", params={"event_id": "signup", "date": "20240115"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == 17
    assert body["granularity"] == "day"
    assert body["env"] == "all"


def test_app_unique_counts(client, store):
    key = "trk_42:all:week:202403:user:unique:oid:o1:env:all:counts"
    store.setbit(key, 1, 1)
    store.setbit(key, 9, 1)
    resp = client.get(
        "/counts/week", params={"date": "202403", "user": "unique", "oid": "o1"}
    )
    assert resp.status_code == 200
    assert resp.json()["value"] == 2
    assert resp.json()["event_id"] == "all"
    assert resp.json()["unique"] is True


def test_total_counts_ignore_date(client, store):
    store.set("trk_42:all:total:env:all:counts", "3")
    resp = client.get("/counts/total", params={"date": "20240115"})
    assert resp.json()["value"] == 3
    assert resp.json()["date"] is None


def test_unknown_granularity(client):
    assert client.get("/counts/minute").status_code == 422


def test_corrupt_counter_is_500(client, store):
    store.set("trk_42:all:day:20240115:env:all:counts", "n/a")
    resp = client.get("/counts/day", params={"date": "20240115"})
    assert resp.status_code == 500
    assert "not a non-negative integer" in resp.json()["detail"]


def test_store_failure_is_503(client, monkeypatch, store):
    def _boom(*args, **kwargs):
        raise redis.exceptions.ConnectionError("redis down")

    monkeypatch.setattr(store, "get", _boom)
    resp = client.get("/counts/day")
    assert resp.status_code == 503
    assert "redis down" in resp.json()["detail"]


def test_events(client, store):
    store.sadd("trk_42:events", "signup", "click")
    resp = client.get("/events")
    assert resp.status_code == 200
    assert resp.json() == {"events": ["click", "signup"]}


def test_event_objects_and_envs(client, store):
    store.hset("trk_42:signup:hashed:oid", "o1", "Plan A")
    store.hset("trk_42:signup:hashed:env", "web", "Web")
    assert client.get("/events/signup/objects").json() == {
        "event_id": "signup",
        "objects": {"o1": "Plan A"},
    }
    assert client.get("/events/signup/envs").json()["envs"] == {"web": "Web"}


def test_health_ready(client):
    assert client.get("/healthz").status_code == 200
    resp = client.get("/readyz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ready", "app_id": "42"}


def test_not_ready_without_reader(client):
    app.state.reader = None
    assert client.get("/readyz").status_code == 503
    assert client.get("/counts/day").status_code == 503


def test_healthz_error(client, monkeypatch, store):
    def _boom():
        raise redis.exceptions.ConnectionError("redis down")

    monkeypatch.setattr(store, "ping", _boom)
    resp = client.get("/healthz")
    assert resp.status_code == 503
    assert "redis down" in resp.text


def test_metrics_endpoint(client, store):
    client.get("/counts/day")
    resp = client.get("/metrics")
    assert resp.status_code == 200
    assert "tracker_reader_reads_total" in resp.text


def test_lifespan_connects_and_builds_reader(monkeypatch):
    from tracker_reader import main

    fake = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    monkeypatch.setattr(main.redis, "Redis", lambda **kwargs: fake)
    monkeypatch.setattr(main.settings, "tracker_app_id", "shop")

    with TestClient(app) as c:
        assert c.get("/readyz").json() == {"status": "ready", "app_id": "shop"}
    assert app.state.reader is None
    assert app.state.redis is None


def test_lifespan_rejects_missing_app_id(monkeypatch):
    from tracker_reader import main
    from tracker_reader.domain.errors import ConfigError

    fake = fakeredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    client = MagicMock(wraps=fake)
    monkeypatch.setattr(main.redis, "Redis", lambda **kwargs: client)
    monkeypatch.setattr(main.settings, "tracker_app_id", "")

    with pytest.raises(ConfigError):
        with TestClient(app):
            pass

    # the connection opened before the reader failed must not leak
    client.close.assert_called_once()
    assert app.state.redis is None
    assert app.state.reader is None
