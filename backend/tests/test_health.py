from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from catalog_admin.main import app
from catalog_admin import db as database

client = TestClient(app)

def test_ping_and_root():
    assert client.get("/ping").json() == {"pong": True}
    assert client.get("/").json()["ok"] is True
    assert client.get("/version").json() == {"version": "dev"}

def test_request_id_echoed():
    r = client.get("/ping", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"
    assert client.get("/ping").headers["X-Request-ID"]

def test_healthz_ok():
    assert client.get("/healthz").json() == {"status": "ok"}

def test_healthz_degraded(monkeypatch):
    # force SessionLocal to throw
    class Boom:
        def __enter__(self): raise OperationalError("SELECT 1", {}, Exception("db down"))
        def __exit__(self, *a): return False
    monkeypatch.setattr(database, "SessionLocal", lambda: Boom())
    r = client.get("/healthz")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "degraded"
    assert "db down" in body["error"]
