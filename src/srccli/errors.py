"""Exception types raised by srccli commands.

Every error is terminal for the invocation; the CLI entrypoint renders them.
"""

from __future__ import annotations

from pathlib import Path


class SrcError(Exception):
    """Base class for srccli errors."""


class UsageError(SrcError, ValueError):
    """A required flag is missing or invalid."""


class UnknownTemplateError(SrcError, ValueError):
    """The requested command builder style is not known."""

    def __init__(self, style: str) -> None:
        self.style = style
        super().__init__(f'unknown or invalid template type "{style}"')


class TargetsFileError(SrcError, RuntimeError):
    """A custom targets file could not be opened or parsed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f'invalid targets file "{path}": {reason}')


class ConfigError(SrcError, RuntimeError):
    """The srccli configuration file could not be loaded."""
