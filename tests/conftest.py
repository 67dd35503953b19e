import json
from typing import Any, Dict, List, Tuple

import httpx
import pytest
import pytest_asyncio

from kdesdk.vfs import VFS

BASE_URL = "http://fs.test"

REPORT = {
    "filename": "report.pdf",
    "path": "/docs/report.pdf",
    "isDirectory": False,
    "isFile": True,
    "mime": "application/pdf",
    "size": 1024,
    "stat": {},
}

DOCS_DIR = {
    "filename": "docs",
    "path": "/docs",
    "isDirectory": True,
    "isFile": False,
    "mime": None,
    "size": 0,
    "stat": {"mtime": 1700000000, "mode": 16877},
}


class FakeBackend:
    """Answers by route path and records every request it sees."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Tuple[int, Dict[str, Any]]] = {}

    def respond(self, path: str, status_code: int = 200, **kwargs: Any) -> None:
        self.routes[path] = (status_code, kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, kwargs = self.routes.get(request.url.path, (200, {}))
        return httpx.Response(status_code, **kwargs)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def backend():
    return FakeBackend()


@pytest_asyncio.fixture
async def vfs(backend):
    client = VFS(BASE_URL, transport=httpx.MockTransport(backend))
    yield client
    await client.aclose()
