"""Database dump target models."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Target(BaseModel):
    """Connection parameters for one database deployment."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    target: str = Field(
        default="",
        description="Where the database runs, e.g. a docker container or k8s statefulset. "
        "Empty means the local default.",
    )
    dbname: str = Field(default="", description="Name of the database")
    username: str = Field(default="", description="Username for database access")
    password: str = Field(
        default="",
        description="Password for database access; only set it if it is non-sensitive",
    )

    @field_validator("target", "dbname", "username", "password", mode="before")
    @classmethod
    def _empty_for_null(cls, value: Any) -> Any:
        # A YAML key with no value loads as None
        return "" if value is None else value


class Targets(BaseModel):
    """The three Sourcegraph databases that make up a snapshot."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    primary: Target = Field(default_factory=Target)
    codeintel: Target = Field(default_factory=Target)
    codeinsights: Target = Field(default_factory=Target)

    @field_validator("primary", "codeintel", "codeinsights", mode="before")
    @classmethod
    def _default_for_null(cls, value: Any) -> Any:
        return {} if value is None else value

    def items(self) -> Iterator[tuple[str, Target]]:
        """Yield (name, target) in primary, codeintel, codeinsights order."""
        yield "primary", self.primary
        yield "codeintel", self.codeintel
        yield "codeinsights", self.codeinsights
