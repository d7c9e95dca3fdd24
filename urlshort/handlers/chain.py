"""
Fallback chain composition.

Layering, outermost first:

    structured rules (YAML, else JSON)  ->  built-in paths  ->  default greeting

The chain is assembled once at startup and never reconfigured.
"""
import logging
from typing import Dict, Optional

from .base import Handler, default_handler
from .decoders import JSON, YAML, get_decoder
from .routers import map_handler, rules_handler

logger = logging.getLogger(__name__)

# Always-active documentation links, overridable by structured rules.
BUILTIN_PATHS: Dict[str, str] = {
    "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
    "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
}


def build_handler(
    yaml_bytes: Optional[bytes] = None,
    json_bytes: Optional[bytes] = None,
) -> Handler:
    """
    Compose the top-level Handler.

    A YAML payload takes precedence over a JSON one; empty or missing
    payloads count as not supplied.

    Raises:
        DecodeError: if the selected payload is malformed.
    """
    handler = map_handler(BUILTIN_PATHS, default_handler)

    if yaml_bytes:
        format, payload = YAML, yaml_bytes
    elif json_bytes:
        format, payload = JSON, json_bytes
    else:
        logger.info("No structured rules supplied, serving built-in paths only")
        return handler

    rules = get_decoder(format)(payload)
    logger.info(f"Loaded {len(rules)} {format} redirect rules")
    return rules_handler(rules, handler)
