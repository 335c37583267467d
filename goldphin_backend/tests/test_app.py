import pytest
from fastapi.testclient import TestClient

from goldphin_backend import app as app_module
from goldphin_backend.app import app
from goldphin_backend.errors import TransportError
from goldphin_backend.providers.types import UpstreamReply

USER = [{"role": "user", "content": "hi"}]


class StubSender:
    def __init__(self, reply=None, exc=None):
        self.reply = reply
        self.exc = exc
        self.urls = []

    async def send(self, method, url, headers, body):
        self.urls.append(url)
        if self.exc is not None:
            raise self.exc
        return self.reply


@pytest.fixture
def client():
    original = (app.state.sender, app.state.max_body_bytes)
    yield TestClient(app)
    app.state.sender, app.state.max_body_bytes = original


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["message"] == "Goldphin AI Backend is running!"
    assert data["timestamp"].endswith("Z")


def test_root_descriptor(client):
    data = client.get("/").json()
    assert data["version"] == "1.0.0"
    assert data["endpoints"] == {"chat": "POST /api/chat", "health": "GET /health"}


def test_chat_success(client):
    app.state.sender = StubSender(UpstreamReply(200, {"candidates": [{"content": {"parts": [{"text": "hey"}]}}]}))
    r = client.post("/api/chat", json={"provider": "gemini", "apiKey": "k", "messages": USER})
    assert r.status_code == 200
    assert r.json() == {"success": True, "response": "hey"}
    assert app.state.sender.urls[0].endswith(":generateContent?key=k")


def test_chat_custom_endpoint_alias(client):
    app.state.sender = StubSender(UpstreamReply(200, {"response": "r"}))
    r = client.post(
        "/api/chat",
        json={"provider": "custom", "apiKey": "k", "messages": USER, "customEndpoint": "https://llm.local/chat"},
    )
    assert r.json() == {"success": True, "response": "r"}
    assert app.state.sender.urls == ["https://llm.local/chat"]


def test_chat_validation_errors(client):
    r = client.post("/api/chat", json={"messages": USER})
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "Missing required fields" in r.json()["error"]

    r = client.post("/api/chat", json={"provider": "gemini", "apiKey": "k", "messages": []})
    assert r.status_code == 400
    assert "non-empty" in r.json()["error"]


def test_chat_rejects_non_object_body(client):
    r = client.post("/api/chat", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Request body must be a JSON object"}


def test_chat_upstream_status_is_preserved(client):
    app.state.sender = StubSender(UpstreamReply(401, {"error": {"message": "bad key"}}))
    r = client.post("/api/chat", json={"provider": "openai", "apiKey": "k", "messages": USER})
    assert r.status_code == 401
    assert r.json() == {"success": False, "error": "bad key"}


def test_chat_transport_failure(client):
    app.state.sender = StubSender(exc=TransportError("upstream unreachable"))
    r = client.post("/api/chat", json={"provider": "anthropic", "apiKey": "k", "messages": USER})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "upstream unreachable"}


def test_health_timestamp_has_millisecond_precision(client):
    ts = client.get("/health").json()["timestamp"]
    # e.g. 2026-10-18T15:30:00.123Z
    assert len(ts.split(".")[1]) == 4


def test_chat_rejects_missing_body(client):
    r = client.post("/api/chat")
    assert r.status_code == 400
    assert r.json() == {"success": False, "error": "Request body must be a JSON object"}


def test_chat_rejects_oversized_body(client):
    app.state.max_body_bytes = 64
    app.state.sender = StubSender(UpstreamReply(200, {"response": "never"}))
    big = [{"role": "user", "content": "x" * 200}]
    r = client.post("/api/chat", json={"provider": "openai", "apiKey": "k", "messages": big})
    assert r.status_code == 413
    assert r.json() == {"success": False, "error": "Request body too large"}
    assert app.state.sender.urls == []


def test_cors_preflight_allows_any_origin(client):
    r = client.options(
        "/api/chat",
        headers={"Origin": "https://example.org", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"


def test_unhandled_route_error_returns_failure_shape(monkeypatch):
    async def broken(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(app_module, "handle", broken)
    client = TestClient(app, raise_server_exceptions=False)
    r = client.post("/api/chat", json={"provider": "openai", "apiKey": "k", "messages": USER})
    assert r.status_code == 500
    assert r.json() == {"success": False, "error": "boom"}


def test_lifespan_startup_runs():
    with TestClient(app) as c:
        assert c.get("/health").status_code == 200
