from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "https://sourcegraph.com"
DEFAULT_SNAPSHOT_DIR = Path("src-snapshot")

_HEADER_ENV_PREFIX = "SRC_HEADER_"


def _header_name(env_key: str) -> str:
    # SRC_HEADER_X_REQUEST_SOURCE -> X-Request-Source
    raw = env_key[len(_HEADER_ENV_PREFIX) :]
    return "-".join(part.capitalize() for part in raw.split("_") if part)


class Settings(BaseModel):
    """Settings shared by every srccli command."""

    model_config = ConfigDict(extra="forbid")

    endpoint: str = DEFAULT_ENDPOINT
    access_token: str | None = None
    additional_headers: dict[str, str] = Field(default_factory=dict)
    snapshot_dir: Path = DEFAULT_SNAPSHOT_DIR
    timeout: float = Field(default=30.0, ge=1)

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("endpoint must not be empty")
        return value

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        # Environment always wins over the config file
        if os.environ.get("SRC_ENDPOINT"):
            self.endpoint = os.environ["SRC_ENDPOINT"].strip().rstrip("/")
        if os.environ.get("SRC_ACCESS_TOKEN"):
            self.access_token = os.environ["SRC_ACCESS_TOKEN"]
        for key, value in sorted(os.environ.items()):
            if key.startswith(_HEADER_ENV_PREFIX) and _header_name(key):
                self.additional_headers[_header_name(key)] = value
