"""
CLI entry point for the task service.

Usage:
    # Create the tasks table in the configured database
    python -m taskapp.cli init-db

    # Start the HTTP API
    python -m taskapp.cli serve --port 8000
"""

import argparse
import logging

from taskapp.core.config import settings
from taskapp.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create missing tables in the configured database."""
    from taskapp.infrastructure.database import init_schema
    from taskapp.interfaces.tasks.dependencies import get_engine

    init_schema(get_engine())


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI application under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("taskapp.main:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Task Service CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument(
        "--reload", action="store_true", help="Reload on code changes"
    )
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
