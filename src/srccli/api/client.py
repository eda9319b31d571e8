"""Minimal synchronous client for the Sourcegraph GraphQL API."""

from __future__ import annotations

import argparse
import json
import logging
import re
import shlex
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TextIO

import httpx

from srccli import __version__
from srccli.api.errors import GraphQLErrors, HTTPStatusError
from srccli.config.settings import Settings

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/.api/graphql"

_OPERATION_NAME = re.compile(r"^\s*(?:query|mutation)\s+([A-Za-z_][A-Za-z0-9_]*)", re.MULTILINE)


@dataclass(frozen=True)
class ApiFlags:
    """API flags shared by every command that talks to the server."""

    dump_requests: bool = False
    get_curl: bool = False
    trace: bool = False
    insecure_skip_verify: bool = False

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        group = parser.add_argument_group("API flags")
        group.add_argument(
            "-dump-requests",
            "--dump-requests",
            dest="dump_requests",
            action="store_true",
            help="Log GraphQL requests and variables before sending them",
        )
        group.add_argument(
            "-get-curl",
            "--get-curl",
            dest="get_curl",
            action="store_true",
            help="Print the curl command for executing this query and exit (WARNING: includes "
            "printing your access token!)",
        )
        group.add_argument(
            "-trace",
            "--api-trace",
            dest="api_trace",
            action="store_true",
            help="Log the trace ID for the query. Not the same as the global --trace, which "
            "goes before the subcommand",
        )
        group.add_argument(
            "-insecure-skip-verify",
            "--insecure-skip-verify",
            dest="insecure_skip_verify",
            action="store_true",
            help="Skip validation of TLS certificates against trusted chains",
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ApiFlags:
        return cls(
            dump_requests=bool(getattr(args, "dump_requests", False)),
            get_curl=bool(getattr(args, "get_curl", False)),
            trace=bool(getattr(args, "api_trace", False)),
            insecure_skip_verify=bool(getattr(args, "insecure_skip_verify", False)),
        )


def operation_name(query: str) -> str:
    """Return the operation name of a GraphQL document, capitalized for the URL."""
    match = _OPERATION_NAME.search(query)
    if not match:
        return ""
    name = match.group(1)
    return name[:1].upper() + name[1:]


class Request:
    """A single GraphQL request bound to a client."""

    def __init__(self, client: Client, query: str, variables: Mapping[str, Any]) -> None:
        self.client = client
        self.query = query
        self.variables = dict(variables)

    @property
    def url(self) -> str:
        name = operation_name(self.query)
        url = self.client.settings.endpoint + GRAPHQL_PATH
        return f"{url}?{name}" if name else url

    def payload(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}

    def curl_command(self) -> str:
        parts = ["curl"]
        for name, value in self.client.headers.items():
            parts.extend(["-H", f"{name}: {value}"])
        parts.extend(["-d", json.dumps(self.payload()), self.url])
        return " ".join(shlex.quote(p) for p in parts)

    def do(self, result: dict[str, Any] | None = None) -> bool:
        """Send the request.

        Returns False without sending anything when the caller only asked for the
        curl command. Transport errors from httpx propagate unchanged.
        """
        flags = self.client.flags
        if flags.get_curl:
            print(self.curl_command(), file=self.client.out)
            return False

        if flags.dump_requests:
            logger.warning(
                "GraphQL request to %s\n%s\nvariables: %s",
                self.url,
                self.query,
                json.dumps(self.variables, indent=2),
            )

        response = self.client.http.post(self.url, json=self.payload())

        trace_id = response.headers.get("x-trace")
        if flags.trace and trace_id:
            logger.warning("x-trace: %s", trace_id)

        if response.status_code != 200:
            raise HTTPStatusError(response.status_code, response.text)

        try:
            body = response.json()
        except ValueError as e:
            raise ValueError(f"invalid JSON response from {self.url}: {e}") from e

        errors = body.get("errors") or []
        if errors:
            raise GraphQLErrors(errors)

        if result is not None:
            result.update(body.get("data") or {})
        return True


class Client:
    """Sourcegraph API client configured from Settings and ApiFlags."""

    def __init__(
        self,
        settings: Settings,
        flags: ApiFlags | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.settings = settings
        self.flags = flags or ApiFlags()
        self.out = out
        self.headers = self._build_headers()
        self.http = httpx.Client(
            headers=self.headers,
            timeout=settings.timeout,
            verify=not self.flags.insecure_skip_verify,
            transport=transport,
        )

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": f"src-cli/{__version__}",
            "Content-Type": "application/json",
        }
        headers.update(self.settings.additional_headers)
        if self.settings.access_token:
            headers["Authorization"] = f"token {self.settings.access_token}"
        if self.flags.trace:
            headers["X-Sourcegraph-Should-Trace"] = "true"
        return headers

    def new_request(self, query: str, variables: Mapping[str, Any]) -> Request:
        return Request(self, query, variables)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
