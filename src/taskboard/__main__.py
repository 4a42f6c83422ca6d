"""CLI entry point for taskboard."""

import argparse
from pathlib import Path

from . import __version__
from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Terminal task board backed by a REST task server",
    )
    parser.add_argument(
        "--server-url",
        default=None,
        help="Root URL of the task server (default: TASKBOARD_SERVER_URL or taskboard.yml)",
    )
    parser.add_argument(
        "--authorization",
        default=None,
        help="Authorization header value sent with every request",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Tasks shown per 'load more' step",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Layer CLI flags over environment and file settings."""
    settings_kwargs: dict = {}
    if args.server_url:
        settings_kwargs["server_url"] = args.server_url
    if args.authorization:
        settings_kwargs["authorization"] = args.authorization
    if args.page_size:
        settings_kwargs["page_size"] = args.page_size
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    return Settings(**settings_kwargs)


def main() -> None:
    """Main entry point."""
    settings = build_settings(parse_args())

    setup_logging(settings.verbose, settings.log_file)

    # Import here so --help and --version stay fast
    from .app import run

    run(settings)


if __name__ == "__main__":
    main()
