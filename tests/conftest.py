import json
from typing import Any, Callable, Dict

import httpx
import pytest

from matchwatch.core.http import RequestGateway
from matchwatch.ui.page import Page

BASE_URL = "http://feed.test"


def json_response(data: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(data).encode(), headers={"content-type": "application/json"})


def make_gateway(handler: Callable, timeout_seconds: float = 1.0) -> RequestGateway:
    return RequestGateway(timeout_seconds=timeout_seconds, transport=httpx.MockTransport(handler))


class FeedServer:
    """Routes requests by path to canned responses and records what was asked."""

    def __init__(self, routes: Dict[str, Any]):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, text="no route")
        if callable(route):
            return route(request)
        if isinstance(route, httpx.Response):
            return route
        return json_response(route)


@pytest.fixture
def page():
    return Page()


@pytest.fixture
def feed():
    return FeedServer({})


@pytest.fixture
def gateway(feed):
    return make_gateway(feed)
