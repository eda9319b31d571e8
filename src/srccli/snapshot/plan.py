"""Plan the database dump commands for a snapshot."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from srccli.snapshot.pgdump import BuilderStyle, CommandTemplate, build_commands, get_template
from srccli.snapshot.targets import AUTO, ResolvedTargets, resolve_targets

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DumpPlan:
    template: CommandTemplate
    targets: ResolvedTargets
    out_dir: Path
    commands: list[str]


def plan_database_dumps(
    builder: CommandTemplate | BuilderStyle | str | None,
    selector: str = AUTO,
    *,
    out_dir: Path,
) -> DumpPlan:
    """Resolve the template, then the targets, then render the commands.

    The template is resolved first so an unknown builder fails before any file
    is read.
    """
    template = get_template(builder)
    resolved = resolve_targets(selector, template)
    commands = build_commands(out_dir, template, resolved.targets)
    return DumpPlan(template=template, targets=resolved, out_dir=out_dir, commands=commands)


def ensure_snapshot_dir(out_dir: Path) -> OSError | None:
    """Create the snapshot directory, returning the error instead of raising it."""
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.debug("Could not create %s: %s", out_dir, e)
        return e
    return None
