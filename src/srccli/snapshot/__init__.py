from srccli.snapshot.pgdump import (
    BuilderStyle,
    CommandTemplate,
    build_commands,
    dump_command,
    get_template,
)
from srccli.snapshot.plan import DumpPlan, ensure_snapshot_dir, plan_database_dumps
from srccli.snapshot.targets import (
    AUTO,
    PREDEFINED_TARGETS,
    ResolvedTargets,
    load_targets_file,
    resolve_targets,
    targets_key,
)

__all__ = [
    "AUTO",
    "PREDEFINED_TARGETS",
    "BuilderStyle",
    "CommandTemplate",
    "DumpPlan",
    "ResolvedTargets",
    "build_commands",
    "dump_command",
    "ensure_snapshot_dir",
    "get_template",
    "load_targets_file",
    "plan_database_dumps",
    "resolve_targets",
    "targets_key",
]
