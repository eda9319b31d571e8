"""Errors returned by the Sourcegraph GraphQL API."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from srccli.errors import SrcError


class HTTPStatusError(SrcError):
    """The API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code == 401:
            message = (
                "error: 401 Unauthorized\n\n"
                "Verify that the SRC_ACCESS_TOKEN environment variable (or access_token "
                "in the config file) holds a valid access token."
            )
        else:
            message = f"error: {status_code}\n\n{body}".rstrip()
        super().__init__(message)


class GraphQLError(SrcError):
    """A single entry of a GraphQL ``errors`` array."""

    def __init__(self, payload: Mapping[str, Any]) -> None:
        self.payload = dict(payload)
        super().__init__(str(self.payload.get("message", self.payload)))

    @property
    def path(self) -> list[Any]:
        return list(self.payload.get("path") or [])


class GraphQLErrors(SrcError):
    """All errors returned with a GraphQL response."""

    def __init__(self, errors: Sequence[Mapping[str, Any]]) -> None:
        self.errors = [GraphQLError(e) for e in errors]
        if len(self.errors) == 1:
            message = f"GraphQL error: {self.errors[0]}"
        else:
            lines = "\n".join(f"  - {e}" for e in self.errors)
            message = f"{len(self.errors)} GraphQL errors:\n{lines}"
        super().__init__(message)
