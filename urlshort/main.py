"""
Redirect Server
FastAPI application that hands every request to the composed redirect handler.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response

from .config import settings
from .handlers import Handler, build_handler
from .sources import read_file_bytes

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def configure_logging(level: str = settings.log_level, log_file: Optional[str] = settings.log_file):
    """Configure root logging for the server process."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def create_app(handler: Handler) -> FastAPI:
    """
    Create the application serving ``handler`` for every path and method.

    The framework's documentation routes are disabled so no built-in route
    can shadow a redirect rule.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting redirect server...")
        yield
        logger.info("Shutting down redirect server...")

    app = FastAPI(
        title="urlshort",
        description="Configuration-driven HTTP redirect server",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    @app.api_route("/{path:path}", methods=ALL_METHODS, include_in_schema=False)
    def dispatch(request: Request) -> Response:
        """Resolve the request through the handler chain."""
        return handler(request)

    return app


def build_app(yaml_path: Optional[str] = None, json_path: Optional[str] = None) -> FastAPI:
    """
    Read the rule files, compose the handler chain and wrap it in an app.

    Unreadable files are treated as not supplied.

    Raises:
        DecodeError: if the selected rule file is malformed.
    """
    handler = build_handler(
        yaml_bytes=read_file_bytes(yaml_path),
        json_bytes=read_file_bytes(json_path),
    )
    return create_app(handler)
