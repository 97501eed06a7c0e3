from typing import Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from main import app
from settings import settings
from sources.alc import get_client

BASE = settings.ALC_API_BASE.rstrip("/")


class StubUpstream:
    """Routes upstream paths to canned JSON and records what was asked for."""

    def __init__(self):
        self.routes: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.requested: List[str] = []

    def json(self, path: str, payload, status_code: int = 200):
        self.routes[path] = lambda request: httpx.Response(status_code, json=payload)

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        prefix = httpx.URL(BASE).path
        rel = path[len(prefix):].lstrip("/") if path.startswith(prefix) else path
        self.requested.append(rel)
        if rel in self.routes:
            return self.routes[rel](request)
        return httpx.Response(404, text="not found")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=BASE, transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream() -> StubUpstream:
    return StubUpstream()


@pytest.fixture
def client(upstream: StubUpstream):
    async def _override():
        async with upstream.client() as cli:
            yield cli

    app.dependency_overrides[get_client] = _override
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
