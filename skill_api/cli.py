"""Command-line interface for the skill API."""

from __future__ import annotations

import argparse
import logging

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from skill_api.config import build_sqlalchemy_db_url, mask_db_url, settings
from skill_api.database import Base, build_engine
from skill_api.models import Skill


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="skill-api",
        description="Skill CRUD service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  skill-api create-table
  skill-api serve --port 8910
        """,
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        required=True,
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP server",
    )
    serve_parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind (default: {settings.host})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind (default: {settings.port})",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    table_parser = subparsers.add_parser(
        "create-table",
        help="Create the skill table if it does not exist",
    )
    table_parser.add_argument(
        "--db-url",
        default=None,
        help="Target DB URL (defaults to DATABASE_URL / DB_* settings).",
    )

    return parser


def run_serve_command(args: argparse.Namespace) -> int:
    """Run the FastAPI server until SIGINT/SIGTERM.

    Uvicorn stops accepting connections on the signal and gives in-flight
    requests SHUTDOWN_TIMEOUT seconds before closing them.
    """
    logger.info("Starting server on %s:%s", args.host, args.port)
    uvicorn.run(
        "skill_api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    return 0


def run_create_table_command(args: argparse.Namespace) -> int:
    url = args.db_url or build_sqlalchemy_db_url(settings)
    logger.info("creating skill table on: %s", mask_db_url(url))

    engine = build_engine(url)
    try:
        Base.metadata.create_all(bind=engine, tables=[Skill.__table__])
    except SQLAlchemyError as exc:
        logger.error("Error: Can't create skill table: %s", exc)
        return 1
    finally:
        engine.dispose()

    logger.info("Create skill table success")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(settings.log_level)

    command_map = {
        "serve": run_serve_command,
        "create-table": run_create_table_command,
    }

    try:
        return command_map[args.command](args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
