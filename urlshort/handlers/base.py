"""
The Handler capability shared by every router.

A Handler maps a request to a response. Routers close over their rule data
and a fallback Handler, and return a new Handler; composing them yields the
fallback chain. Handlers are synchronous and side-effect free apart from
the response they build, so they are safe to call from any worker thread.
"""
from typing import Callable
from urllib.parse import quote

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

Handler = Callable[[Request], Response]

DEFAULT_BODY = "Hello, world!"


def request_path(request: Request) -> str:
    """The decoded request path, exactly as the server received it.

    ``request.url.path`` re-parses the decoded path, so an escaped ``?`` or
    ``#`` would truncate it; the raw scope value does not.
    """
    return request.scope["path"]


def _escape_non_ascii(url: str) -> str:
    # Header values must be latin-1; everything else is left verbatim.
    return "".join(char if ord(char) < 128 else quote(char) for char in url)


def redirect(url: str) -> Response:
    """Permanent (301) redirect to ``url``, with ``url`` used as the Location."""
    return Response(status_code=301, headers={"location": _escape_non_ascii(url)})


def default_handler(request: Request) -> Response:
    """Terminal handler: answers every request with a plain-text greeting."""
    return PlainTextResponse(DEFAULT_BODY, status_code=200)
