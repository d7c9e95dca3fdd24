"""
Routers: Handler constructors that either redirect or defer to a fallback.
"""
from typing import Mapping

from starlette.requests import Request
from starlette.responses import Response

from ..models import RuleSet
from .base import Handler, redirect, request_path
from .decoders import Decoder, decode_json, decode_yaml


def map_handler(paths_to_urls: Mapping[str, str], fallback: Handler) -> Handler:
    """
    Exact-match router over a static path -> URL mapping.

    On a hit the request is redirected (301) to the mapped URL; otherwise
    ``fallback`` handles it. Never fails.
    """
    mapping = dict(paths_to_urls)

    def handle(request: Request) -> Response:
        url = mapping.get(request_path(request))
        if url is not None:
            return redirect(url)
        return fallback(request)

    return handle


def rules_handler(rules: RuleSet, fallback: Handler) -> Handler:
    """Router over an already-decoded RuleSet. Rules are scanned in order."""
    rules = tuple(rules)

    def handle(request: Request) -> Response:
        path = request_path(request)
        for rule in rules:
            if rule.path == path:
                return redirect(rule.url)
        return fallback(request)

    return handle


def rule_handler(payload: bytes, decode: Decoder, fallback: Handler) -> Handler:
    """
    Structured-rule router.

    Decodes ``payload`` with ``decode`` and returns a Handler that redirects
    to the first rule whose path equals the request path, deferring to
    ``fallback`` when none does.

    Raises:
        DecodeError: if the payload is malformed. No handler is built.
    """
    return rules_handler(decode(payload), fallback)


def yaml_handler(payload: bytes, fallback: Handler) -> Handler:
    """Structured-rule router over a YAML payload."""
    return rule_handler(payload, decode_yaml, fallback)


def json_handler(payload: bytes, fallback: Handler) -> Handler:
    """Structured-rule router over a JSON payload."""
    return rule_handler(payload, decode_json, fallback)
