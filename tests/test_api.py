"""
Tests for the HTTP routes, backed by a mocked data service.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from conftest import BASE_URL, FeedServer, make_gateway
from matchwatch.api.v1.routes import board as board_routes
from matchwatch.main import app
from matchwatch.services.board import MatchBoard


@pytest.fixture
def feed():
    return FeedServer({
        "/scrape": {
            "live_matches": [{"title": "Team Live", "note": "LIVE", "stream": "https://site.test/1"}],
            "upcoming_matches": [{"league": "Cup", "time": "21:00", "home": "C", "away": "D"}],
        },
        "/stream": lambda request: (
            httpx.Response(200, json={"realLink": "https://player.test/1"})
            if request.url.params.get("url") == "https://site.test/1"
            else httpx.Response(200, json={"error": "not found"})
        ),
    })


@pytest.fixture
def client(feed, monkeypatch):
    monkeypatch.setattr(
        board_routes, "new_board", lambda: MatchBoard(gateway=make_gateway(feed), base_url=BASE_URL)
    )
    return TestClient(app)


def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}


def test_cards(client):
    r = client.get("/cards")
    assert r.status_code == 200
    body = r.json()
    assert body["shape"] == "live_upcoming"
    assert [c["title"] for c in body["live"]] == ["Team Live"]
    assert body["live"][0]["is_live"] is True
    assert body["upcoming"][0]["title"] == "C vs D"
    assert body["upcoming"][0]["note"] == "Cup • 21:00"


def test_cards_upstream_failure(client, feed):
    feed.routes["/scrape"] = httpx.Response(500)
    r = client.get("/cards")
    assert r.status_code == 502


def test_index_renders_cards(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'data-title="Team Live"' in r.text
    assert "C vs D" in r.text


def test_index_filter(client):
    r = client.get("/", params={"q": "zzz"})
    assert "display:none" in r.text


def test_watch_success(client):
    r = client.get("/watch", params={"url": "https://site.test/1", "title": "Team Live"})
    assert r.status_code == 200
    assert r.json() == {"title": "Team Live", "src": "https://player.test/1"}


def test_watch_errors(client):
    assert client.get("/watch").status_code == 400
    r = client.get("/watch", params={"url": "https://site.test/other"})
    assert r.status_code == 404
    assert r.json()["detail"] == "not found"
