from __future__ import annotations

import argparse
import logging

from srccli.api import ApiFlags, Client
from srccli.config import load_settings
from srccli.repos import add_key_value_pair, build_key_value_pair

logger = logging.getLogger(__name__)

ADD_KVP_EPILOG = """
Examples:

  Add a key-value pair to a repository:

    $ src repos add-kvp -repo=repoID -key=mykey -value=myvalue

  Omitting -value will create a tag (a key with a null value).
"""


def configure_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("repos", help="Manage repositories")
    parser.set_defaults(func=_run_repos)

    repos_subparsers = parser.add_subparsers(dest="repos_command")

    add_kvp = repos_subparsers.add_parser(
        "add-kvp",
        help="Add a key-value pair to a repository",
        epilog=ADD_KVP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # default=None marks "flag not passed"; "" is a real value
    add_kvp.add_argument(
        "-repo",
        "--repo",
        dest="repo",
        default=None,
        help="The ID of the repo to add the key-value pair to (required)",
    )
    add_kvp.add_argument(
        "-key",
        "--key",
        dest="key",
        default=None,
        help="The name of the key to add (required)",
    )
    add_kvp.add_argument(
        "-value",
        "--value",
        dest="value",
        default=None,
        help="The value associated with the key. Defaults to null.",
    )
    ApiFlags.add_arguments(add_kvp)
    add_kvp.set_defaults(func=run_add_kvp)


def _run_repos(args: argparse.Namespace) -> int:
    print("Select a repos command: add-kvp")
    return 2


def run_add_kvp(args: argparse.Namespace, *, client: Client | None = None) -> int:
    from srccli.cli.ui import print_success

    # Validate before touching config or the network
    pair = build_key_value_pair(args.repo, args.key, args.value)

    if client is None:
        client = Client(load_settings(getattr(args, "config", None)), ApiFlags.from_args(args))

    with client:
        created = add_key_value_pair(client, pair)

    if created:
        print_success(f"Key-value pair '{pair.display()}' created.")
    return 0
