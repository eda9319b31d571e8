"""pg_dump command templates for Sourcegraph database snapshots.

Commands are rendered for the user to run; nothing here executes them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import ClassVar

from srccli.errors import UnknownTemplateError
from srccli.models import Target, Targets


class BuilderStyle(str, Enum):
    pg_dump = "pg_dump"
    docker = "docker"
    kubectl = "kubectl"

    @classmethod
    def parse(cls, value: str | None) -> BuilderStyle:
        """Parse a builder token; empty means pg_dump."""
        if not value:
            return cls.pg_dump
        try:
            return cls(value)
        except ValueError:
            raise UnknownTemplateError(value) from None


def dump_command(t: Target) -> str:
    """Return the bare pg_dump invocation for a target."""
    cmd = f"pg_dump --no-owner --format=p --no-acl --username={t.username} --dbname={t.dbname}"
    if t.password:
        return f"PGPASSWORD={t.password} {cmd}"
    return cmd


class CommandTemplate(ABC):
    """Wraps the pg_dump invocation for one deployment style."""

    style: ClassVar[BuilderStyle]
    # Predefined targets used when --targets=auto
    default_targets: ClassVar[str]

    @abstractmethod
    def render(self, t: Target) -> str: ...


class PgDumpTemplate(CommandTemplate):
    style = BuilderStyle.pg_dump
    default_targets = "local"

    def render(self, t: Target) -> str:
        cmd = dump_command(t)
        if t.target:
            return f"{cmd} --host={t.target}"
        return cmd


class DockerTemplate(CommandTemplate):
    style = BuilderStyle.docker
    default_targets = "docker"

    def render(self, t: Target) -> str:
        return f"docker exec -it {t.target} sh -c '{dump_command(t)}'"


class KubectlTemplate(CommandTemplate):
    style = BuilderStyle.kubectl
    default_targets = "k8s"

    def render(self, t: Target) -> str:
        return f"kubectl exec -it {t.target} -- bash -c '{dump_command(t)}'"


_TEMPLATES: dict[BuilderStyle, CommandTemplate] = {
    template.style: template
    for template in (PgDumpTemplate(), DockerTemplate(), KubectlTemplate())
}


def get_template(style: CommandTemplate | BuilderStyle | str | None) -> CommandTemplate:
    """Return the command template for a builder style.

    An already-resolved template is returned unchanged.

    Raises:
        UnknownTemplateError: If the style is not pg_dump, docker or kubectl.
    """
    if isinstance(style, CommandTemplate):
        return style
    if not isinstance(style, BuilderStyle):
        style = BuilderStyle.parse(style)
    return _TEMPLATES[style]


def build_commands(out_dir: Path, template: CommandTemplate, targets: Targets) -> list[str]:
    """Render one dump command per database, in primary, codeintel, codeinsights order."""
    commands = []
    for name, target in targets.items():
        output = (out_dir / f"{name}.sql").as_posix()
        commands.append(f"{template.render(target)} > {output}")
    return commands
