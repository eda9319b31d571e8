"""Repository key-value pair model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class KeyValuePair(BaseModel):
    """A key-value pair to attach to a repository.

    ``value`` is tri-state: ``None`` creates a tag (null value), which is not
    the same as an empty string.
    """

    repo_id: str = Field(..., min_length=1, description="GraphQL ID of the repository")
    key: str = Field(..., description="Name of the key")
    value: str | None = Field(default=None, description="Value, or None for a tag")

    @property
    def is_tag(self) -> bool:
        return self.value is None

    def variables(self) -> dict[str, Any]:
        return {"repo": self.repo_id, "key": self.key, "value": self.value}

    def display(self) -> str:
        value = "<nil>" if self.value is None else self.value
        return f"{self.key}:{value}"
