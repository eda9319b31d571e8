from __future__ import annotations

import argparse
import logging

from srccli.config import load_settings
from srccli.snapshot import (
    AUTO,
    ensure_snapshot_dir,
    get_template,
    plan_database_dumps,
    targets_key,
)

logger = logging.getLogger(__name__)

DATABASES_DESCRIPTION = """\
'src snapshot databases' generates commands to export Sourcegraph database dumps.
Note that these commands are intended for use as reference - you may need to adjust
the commands for your deployment.
"""

DATABASES_EPILOG = """\
TARGETS FILES
  Predefined targets are available based on default Sourcegraph configurations
  ('local', 'docker', 'k8s'). Custom targets can be provided in YAML format with
  '--targets=targets.yaml', e.g.

    primary:
      target: ...   # where the database runs, e.g. in docker the name of the container
      dbname: ...   # name of database
      username: ... # username for database access
      password: ... # password for database access - only include it if non-sensitive
    codeintel:
      # same as above
    codeinsights:
      # same as above
"""


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("snapshot", help="Manage Sourcegraph instance snapshots")
    parser.set_defaults(func=_run_snapshot)

    snapshot_subparsers = parser.add_subparsers(dest="snapshot_command")

    databases = snapshot_subparsers.add_parser(
        "databases",
        help="Generate commands to export database dumps",
        description=DATABASES_DESCRIPTION,
        epilog=DATABASES_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    databases.add_argument(
        "builder",
        nargs="?",
        default="",
        help="How to reach the databases: pg_dump (default), docker or kubectl",
    )
    databases.add_argument(
        "-targets",
        "--targets",
        dest="targets",
        default=AUTO,
        help="Predefined targets ('local', 'docker' or 'k8s'), or a custom targets.yaml file",
    )
    databases.set_defaults(func=run_databases)


def _run_snapshot(args: argparse.Namespace) -> int:
    print("Select a snapshot command: databases")
    return 2


def run_databases(args: argparse.Namespace) -> int:
    from srccli.cli.ui import (
        print_command_block,
        print_info,
        print_suggestion,
        print_warning,
    )

    # An unknown builder must fail before any file is read, config included
    template = get_template(args.builder)
    settings = load_settings(getattr(args, "config", None))

    key, predefined = targets_key(args.targets, template)
    if predefined:
        print_info(f"Using predefined targets for {key} environments")
    else:
        print_info(f'Using targets defined in targets file "{key}"')

    plan = plan_database_dumps(template, args.targets, out_dir=settings.snapshot_dir)

    error = ensure_snapshot_dir(plan.out_dir)
    if error is not None:
        print_warning(f"Could not create snapshot directory {plan.out_dir}: {error}")

    print_command_block(
        "Run these commands to generate the required database dumps:", plan.commands
    )
    print_suggestion(
        "Note that you may need to do some additional setup, such as authentication, beforehand."
    )
    return 0
