"""
Command-line entry point for the redirect server.
"""
import argparse
import logging
from typing import List, Optional

import uvicorn

from .config import settings
from .errors import DecodeError
from .main import build_app, configure_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="Redirect request paths to URLs from a YAML or JSON rule file.",
    )
    parser.add_argument("--yaml", default=settings.yaml_path, metavar="FILE",
                        help="path/to/file.yml")
    parser.add_argument("--json", default=settings.json_path, metavar="FILE",
                        help="path/to/file.json")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level.upper(), type=str.upper,
                        choices=LOG_LEVELS)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse flags, build the handler chain and serve it until interrupted.

    A malformed rule file aborts startup with exit status 1 before the
    server binds its port.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, settings.log_file)

    try:
        app = build_app(yaml_path=args.yaml, json_path=args.json)
    except DecodeError as exc:
        logger.error(f"Failed to load redirect rules: {exc}")
        raise SystemExit(1) from exc

    logger.info(f"Starting the server on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
