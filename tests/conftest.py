"""
Pytest configuration and shared fixtures for urlshort tests.
"""
import pytest
import pytest_asyncio
from typing import AsyncGenerator, Callable
from httpx import AsyncClient, ASGITransport
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from urlshort.main import create_app


def make_request(path: str, method: str = "GET", query: str = "") -> Request:
    """Build a bare Starlette request for calling handlers directly."""
    return Request({
        "type": "http",
        "method": method,
        "scheme": "http",
        "server": ("test", 80),
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": query.encode(),
        "headers": [(b"host", b"test")],
    })


@pytest.fixture
def sentinel_fallback():
    """A fallback handler that records the paths it was called with."""
    calls = []

    def fallback(request: Request):
        calls.append(request.url.path)
        return PlainTextResponse("fallback", status_code=418)

    fallback.calls = calls
    return fallback


@pytest.fixture
def rule_file(tmp_path) -> Callable[[str, str], str]:
    """Write rule file contents to a temp file and return its path."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


@pytest_asyncio.fixture
async def client_for() -> AsyncGenerator[Callable[..., AsyncClient], None]:
    """Provide a factory of async HTTP clients bound to a handler's app."""
    clients = []

    def _make(handler) -> AsyncClient:
        client = AsyncClient(
            transport=ASGITransport(app=create_app(handler)),
            base_url="http://test",
            follow_redirects=False,
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
