"""
Redirect handlers.

Every router is a Handler constructor that closes over its rule data and a
fallback Handler, so routers compose into a fallback chain.
"""
from .base import Handler, default_handler, redirect, request_path
from .chain import BUILTIN_PATHS, build_handler
from .decoders import decode_json, decode_yaml, encode_rules, get_decoder
from .routers import json_handler, map_handler, rule_handler, rules_handler, yaml_handler

__all__ = [
    "Handler",
    "default_handler",
    "redirect",
    "request_path",
    "BUILTIN_PATHS",
    "build_handler",
    "decode_json",
    "decode_yaml",
    "encode_rules",
    "get_decoder",
    "json_handler",
    "map_handler",
    "rule_handler",
    "rules_handler",
    "yaml_handler",
]
