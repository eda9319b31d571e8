"""Add key-value pairs to repositories."""

from __future__ import annotations

import logging

from srccli.api import Client
from srccli.errors import UsageError
from srccli.models import KeyValuePair

logger = logging.getLogger(__name__)

ADD_KVP_MUTATION = """mutation addKVP(
  $repo: ID!,
  $key: String!,
  $value: String,
) {
  addRepoKeyValuePair(
    repo: $repo,
    key: $key,
    value: $value,
  ) {
    alwaysNil
  }
}"""


def build_key_value_pair(repo: str | None, key: str | None, value: str | None) -> KeyValuePair:
    """Validate raw flag values.

    ``None`` means the flag was not passed. An explicitly passed empty key is
    accepted; only a key that was never set is rejected.
    """
    if not repo:
        raise UsageError("repo is required")
    if key is None:
        raise UsageError("key is required")
    return KeyValuePair(repo_id=repo, key=key, value=value)


def add_key_value_pair(client: Client, pair: KeyValuePair) -> bool:
    """Send the addRepoKeyValuePair mutation.

    Returns True when the pair was created, False when the request was not sent
    (e.g. only the curl command was requested). Errors are not retried.
    """
    logger.debug("Adding key-value pair %s to repo %s", pair.display(), pair.repo_id)
    return client.new_request(ADD_KVP_MUTATION, pair.variables()).do()
