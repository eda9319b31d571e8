from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_src_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SRC_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("SRC_"):
            monkeypatch.delenv(key, raising=False)
