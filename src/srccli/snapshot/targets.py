"""Resolve which database targets a snapshot should use."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final

import yaml
from pydantic import ValidationError

from srccli.errors import TargetsFileError
from srccli.models import Target, Targets
from srccli.snapshot.pgdump import CommandTemplate

logger = logging.getLogger(__name__)

AUTO: Final = "auto"

_KEPT_TAGS: Final = frozenset({"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"})


class _StringScalarLoader(yaml.SafeLoader):
    """SafeLoader that keeps every scalar except null as a string.

    YAML 1.1 would otherwise turn passwords such as `yes` or `2024-01-01` into
    bools and dates, and numbers such as `0777` would lose their leading zero.
    """


_StringScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

_SG = {"dbname": "sg", "username": "sg", "password": "sg"}
_INSIGHTS = {"dbname": "postgres", "username": "postgres", "password": "password"}

# Based on default Sourcegraph deployments. The credentials are the documented
# defaults of those deployments.
PREDEFINED_TARGETS: Final[dict[str, Targets]] = {
    "local": Targets(
        primary=Target(**_SG),
        codeintel=Target(**_SG),
        codeinsights=Target(**_INSIGHTS),
    ),
    # deploy-sourcegraph-managed
    "docker": Targets(
        primary=Target(target="pgsql", **_SG),
        codeintel=Target(target="codeintel-db", **_SG),
        codeinsights=Target(target="codeinsights-db", **_INSIGHTS),
    ),
    # deploy-sourcegraph-helm
    "k8s": Targets(
        primary=Target(target="statefulset/pgsql", **_SG),
        codeintel=Target(target="statefulset/codeintel-db", **_SG),
        codeinsights=Target(target="statefulset/codeinsights-db", **_INSIGHTS),
    ),
}


@dataclass(frozen=True)
class ResolvedTargets:
    """Targets plus where they came from."""

    key: str
    targets: Targets
    predefined: bool


def load_targets_file(path: str | Path) -> Targets:
    """Load a custom targets YAML file.

    Raises:
        TargetsFileError: If the file cannot be opened, parsed or validated.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.load(f, Loader=_StringScalarLoader)
    except OSError as e:
        raise TargetsFileError(path, e.strerror or str(e)) from e
    except yaml.YAMLError as e:
        raise TargetsFileError(path, str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TargetsFileError(path, f"expected a mapping, got {type(data).__name__}")

    try:
        return Targets.model_validate(data)
    except ValidationError as e:
        raise TargetsFileError(path, str(e)) from e


def targets_key(selector: str, template: CommandTemplate) -> tuple[str, bool]:
    """Return the preset name or file path a selector points at, and whether it is a preset.

    ``auto`` picks the preset matching the template. Other values are preset
    names, or else paths to a targets file.
    """
    key = template.default_targets if selector == AUTO else selector
    return key, key in PREDEFINED_TARGETS


def resolve_targets(selector: str, template: CommandTemplate) -> ResolvedTargets:
    """Resolve a --targets selector into exactly one set of targets."""
    key, _ = targets_key(selector, template)

    predefined = PREDEFINED_TARGETS.get(key)
    if predefined is not None:
        logger.debug("Using predefined targets %r", key)
        return ResolvedTargets(key=key, targets=predefined, predefined=True)

    logger.debug("Loading targets file %s", key)
    return ResolvedTargets(key=key, targets=load_targets_file(key), predefined=False)
