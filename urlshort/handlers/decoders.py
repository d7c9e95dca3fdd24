"""
Decoders for structured-data rule payloads.

A payload is a YAML list or JSON array of objects, each holding exactly
two string fields, ``path`` and ``url``:

    - path: /some-path
      url: https://example.com/demo

Decoding is all-or-nothing: any failure raises DecodeError and no partial
RuleSet is ever returned.
"""
import json
from typing import Callable, Dict, Optional

import yaml
from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError
from ..models import RedirectRule, RuleSet

Decoder = Callable[[bytes], RuleSet]

YAML = "yaml"
JSON = "json"

# A null document decodes to an empty RuleSet.
_rules_adapter = TypeAdapter(Optional[RuleSet])


def decode_yaml(payload: bytes) -> RuleSet:
    """Decode a YAML list of rules."""
    try:
        data = yaml.safe_load(payload)
    except yaml.YAMLError as exc:
        raise DecodeError(YAML, str(exc), cause=exc) from exc

    try:
        rules = _rules_adapter.validate_python(data)
    except ValidationError as exc:
        raise DecodeError(YAML, str(exc), cause=exc) from exc
    return rules or []


def decode_json(payload: bytes) -> RuleSet:
    """Decode a JSON array of rules."""
    try:
        rules = _rules_adapter.validate_json(payload)
    except ValidationError as exc:
        raise DecodeError(JSON, str(exc), cause=exc) from exc
    return rules or []


_DECODERS: Dict[str, Decoder] = {
    YAML: decode_yaml,
    JSON: decode_json,
}


def get_decoder(format: str) -> Decoder:
    """Return the decoder registered for ``format`` ("yaml" or "json")."""
    try:
        return _DECODERS[format]
    except KeyError:
        raise ValueError(f"Unsupported rule format: {format!r}") from None


def encode_rules(rules: RuleSet, format: str) -> bytes:
    """Serialize ``rules`` into a payload that decodes back to the same RuleSet."""
    data = [rule.model_dump() for rule in rules]
    if format == YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).encode("utf-8")
    if format == JSON:
        return json.dumps(data, indent=2).encode("utf-8")
    raise ValueError(f"Unsupported rule format: {format!r}")
