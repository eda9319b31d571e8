from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from srccli.cli.repos import configure_parser as configure_repos
from srccli.cli.snapshot import configure_parser as configure_snapshot

_TRUTHY = {"1", "true", "TRUE", "yes", "YES"}


def build_parser() -> argparse.ArgumentParser:
    from srccli import __version__

    parser = argparse.ArgumentParser(
        prog="src",
        description="Sourcegraph CLI helpers (repository metadata + database snapshots)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print full traceback on errors; goes before the subcommand (or set SRC_TRACE=1). "
        "API commands take their own -trace to request a server trace",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("--config", type=Path, help="Path to srccli config.toml")
    subparsers = parser.add_subparsers(dest="command")

    configure_repos(subparsers)
    configure_snapshot(subparsers)

    return parser


def configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    from srccli.cli.ui import error_console

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=False, show_path=verbose)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _tip_for(exc: BaseException) -> str:
    import httpx

    from srccli.api import GraphQLErrors, HTTPStatusError
    from srccli.errors import ConfigError, TargetsFileError, UnknownTemplateError, UsageError

    if isinstance(exc, UsageError):
        return "run the command with -h to see the required flags."
    if isinstance(exc, UnknownTemplateError):
        return "Use one of: pg_dump, docker, kubectl."
    if isinstance(exc, TargetsFileError):
        return "Check the file path, or use one of the predefined targets: local, docker, k8s."
    if isinstance(exc, ConfigError | FileNotFoundError):
        return "Check that your config file path is correct."
    if isinstance(exc, HTTPStatusError) and exc.status_code == 401:
        return "Create an access token in your Sourcegraph user settings."
    if isinstance(exc, httpx.ConnectError | httpx.TimeoutException):
        return "Ensure SRC_ENDPOINT points at a reachable Sourcegraph instance."
    if isinstance(exc, GraphQLErrors):
        return "re-run with -dump-requests to see the request that was sent."
    return "re-run with --trace to see the full traceback."


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 2

    configure_logging(bool(args.verbose))

    want_trace = bool(args.trace) or os.environ.get("SRC_TRACE") in _TRUTHY
    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        return 130
    except Exception as exc:
        from srccli.errors import UsageError

        if want_trace:
            from srccli.cli.ui import error_console

            error_console.print_exception()
        else:
            from srccli.cli.ui import print_error

            print_error(type(exc).__name__, str(exc), tip=_tip_for(exc))
        return 2 if isinstance(exc, UsageError) else 1


def run() -> None:
    """Console script entrypoint."""
    sys.exit(main())
