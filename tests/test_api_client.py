"""Tests for the GraphQL API client."""

from __future__ import annotations

import io
import json
import logging

import httpx
import pytest

from srccli.api import ApiFlags, Client, GraphQLErrors, HTTPStatusError, operation_name
from srccli.config import Settings


def _ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"data": {"currentUser": {"username": "alice"}}})


def test_operation_name_is_capitalized() -> None:
    assert operation_name("mutation addKVP($repo: ID!) { x }") == "AddKVP"
    assert operation_name("\n  query CurrentUser { currentUser { username } }") == "CurrentUser"
    assert operation_name("{ currentUser { username } }") == ""


def test_do_copies_data_into_result() -> None:
    client = Client(Settings(), transport=httpx.MockTransport(_ok))
    result: dict[str, object] = {}

    assert client.new_request("query CurrentUser { x }", {}).do(result) is True
    assert result == {"currentUser": {"username": "alice"}}


def test_headers_include_user_agent_and_additional_headers() -> None:
    settings = Settings(access_token="tok", additional_headers={"X-Extra": "1"})
    client = Client(settings, ApiFlags(trace=True), transport=httpx.MockTransport(_ok))

    assert client.headers["User-Agent"].startswith("src-cli/")
    assert client.headers["X-Extra"] == "1"
    assert client.headers["Authorization"] == "token tok"
    assert client.headers["X-Sourcegraph-Should-Trace"] == "true"


def test_no_authorization_header_without_token() -> None:
    client = Client(Settings(), transport=httpx.MockTransport(_ok))
    assert "Authorization" not in client.headers


def test_get_curl_prints_command_without_sending() -> None:
    sent: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return _ok(request)

    out = io.StringIO()
    settings = Settings(endpoint="https://sg.example.com", access_token="tok")
    client = Client(
        settings, ApiFlags(get_curl=True), transport=httpx.MockTransport(handler), out=out
    )

    assert client.new_request("mutation addKVP { x }", {"key": "k"}).do() is False

    assert sent == []
    printed = out.getvalue()
    assert printed.startswith("curl ")
    assert "https://sg.example.com/.api/graphql?AddKVP" in printed
    assert "'Authorization: token tok'" in printed
    assert json.dumps({"query": "mutation addKVP { x }", "variables": {"key": "k"}}) in printed


def test_dump_requests_logs_query(caplog: pytest.LogCaptureFixture) -> None:
    client = Client(Settings(), ApiFlags(dump_requests=True), transport=httpx.MockTransport(_ok))

    with caplog.at_level(logging.WARNING, logger="srccli.api.client"):
        client.new_request("query CurrentUser { x }", {"a": 1}).do()

    assert "query CurrentUser { x }" in caplog.text
    assert '"a": 1' in caplog.text


def test_trace_id_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"data": {}}, headers={"x-trace": "abc123"})

    client = Client(Settings(), ApiFlags(trace=True), transport=httpx.MockTransport(handler))

    with caplog.at_level(logging.WARNING, logger="srccli.api.client"):
        client.new_request("query Q { x }", {}).do()

    assert "abc123" in caplog.text


def test_unauthorized_mentions_access_token() -> None:
    client = Client(
        Settings(), transport=httpx.MockTransport(lambda r: httpx.Response(401, text="nope"))
    )

    with pytest.raises(HTTPStatusError, match="SRC_ACCESS_TOKEN") as exc_info:
        client.new_request("query Q { x }", {}).do()
    assert exc_info.value.status_code == 401


def test_multiple_graphql_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"errors": [{"message": "first", "path": ["a"]}, {"message": "second"}]}
        )

    client = Client(Settings(), transport=httpx.MockTransport(handler))

    with pytest.raises(GraphQLErrors) as exc_info:
        client.new_request("query Q { x }", {}).do()

    errors = exc_info.value.errors
    assert [str(e) for e in errors] == ["first", "second"]
    assert errors[0].path == ["a"]
    assert "2 GraphQL errors" in str(exc_info.value)


def test_api_flags_from_args() -> None:
    import argparse

    parser = argparse.ArgumentParser()
    ApiFlags.add_arguments(parser)
    args = parser.parse_args(["-get-curl", "-trace", "--insecure-skip-verify"])

    flags = ApiFlags.from_args(args)
    assert flags == ApiFlags(get_curl=True, trace=True, insecure_skip_verify=True)
