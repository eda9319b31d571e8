"""Tests for resolving snapshot targets."""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest

from srccli.errors import TargetsFileError, UnknownTemplateError
from srccli.snapshot import (
    PREDEFINED_TARGETS,
    ensure_snapshot_dir,
    get_template,
    load_targets_file,
    plan_database_dumps,
    resolve_targets,
    targets_key,
)


@pytest.mark.parametrize(
    ("builder", "preset"),
    [("", "local"), ("pg_dump", "local"), ("docker", "docker"), ("kubectl", "k8s")],
)
def test_auto_picks_preset_from_style(builder: str, preset: str) -> None:
    resolved = resolve_targets("auto", get_template(builder))

    assert resolved.key == preset
    assert resolved.predefined
    assert resolved.targets == PREDEFINED_TARGETS[preset]


def test_explicit_preset_overrides_style() -> None:
    resolved = resolve_targets("k8s", get_template("docker"))

    assert resolved.key == "k8s"
    assert resolved.targets.primary.target == "statefulset/pgsql"


def test_local_preset_has_no_targets() -> None:
    local = PREDEFINED_TARGETS["local"]
    assert [t.target for _, t in local.items()] == ["", "", ""]
    assert local.codeinsights.username == "postgres"
    assert local.codeinsights.password == "password"


def test_targets_file(tmp_path: Path) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text(
        dedent("""
        primary:
          target: my-pgsql
          dbname: sg
          username: admin
          password: hunter2
        codeintel:
          target: my-codeintel
          dbname: sg
          username: admin
        codeinsights:
          target: my-insights
          dbname: postgres
          username: postgres
          password: 1234
        """)
    )

    resolved = resolve_targets(str(targets_file), get_template("docker"))

    assert not resolved.predefined
    assert resolved.key == str(targets_file)
    assert resolved.targets.primary.target == "my-pgsql"
    assert resolved.targets.primary.username == "admin"
    assert resolved.targets.codeintel.password == ""
    assert resolved.targets.codeinsights.password == "1234"


def test_targets_file_missing(tmp_path: Path) -> None:
    missing = tmp_path / "nope.yaml"

    with pytest.raises(TargetsFileError, match="invalid targets file") as exc_info:
        resolve_targets(str(missing), get_template("docker"))

    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_targets_file_invalid_yaml(tmp_path: Path) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text("primary: [unclosed\n")

    with pytest.raises(TargetsFileError, match=str(targets_file)):
        load_targets_file(targets_file)


def test_targets_file_ignores_unknown_keys(tmp_path: Path) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text(
        dedent("""
        frontend:
          target: x
        primary:
          target: pgsql
          port: 5432
        """)
    )

    targets = load_targets_file(targets_file)

    assert targets.primary.target == "pgsql"
    assert targets.codeintel.target == ""


@pytest.mark.parametrize("raw", ["yes", "true", "on", "no", "2024-01-01", "0777", "1.50", "1234"])
def test_targets_file_keeps_scalars_verbatim(tmp_path: Path, raw: str) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text(f"primary:\n  target: pgsql\n  dbname: sg\n  password: {raw}\n")

    targets = load_targets_file(targets_file)

    assert targets.primary.password == raw


def test_targets_file_null_is_empty(tmp_path: Path) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text("primary:\n  target: pgsql\n  password: ~\n  username:\ncodeintel:\n")

    targets = load_targets_file(targets_file)

    assert targets.primary.password == ""
    assert targets.primary.username == ""
    assert targets.codeintel.target == ""


def test_targets_key_names_file_without_reading_it(tmp_path: Path) -> None:
    missing = str(tmp_path / "missing.yaml")

    assert targets_key("auto", get_template("kubectl")) == ("k8s", True)
    assert targets_key("docker", get_template("")) == ("docker", True)
    assert targets_key(missing, get_template("docker")) == (missing, False)


def test_targets_file_not_a_mapping(tmp_path: Path) -> None:
    targets_file = tmp_path / "targets.yaml"
    targets_file.write_text("- primary\n- codeintel\n")

    with pytest.raises(TargetsFileError, match="expected a mapping"):
        load_targets_file(targets_file)


def test_plan_unknown_style_does_no_file_io(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    import srccli.snapshot.plan as plan_module

    def fail(*args: object, **kwargs: object) -> None:
        raise AssertionError("targets must not be resolved")

    monkeypatch.setattr(plan_module, "resolve_targets", fail)

    with pytest.raises(UnknownTemplateError):
        plan_database_dumps("frobnicate", str(tmp_path / "targets.yaml"), out_dir=tmp_path)

    assert list(tmp_path.iterdir()) == []


def test_plan_docker_auto(tmp_path: Path) -> None:
    plan = plan_database_dumps("docker", "auto", out_dir=Path("src-snapshot"))

    assert plan.targets.key == "docker"
    assert plan.commands[0].startswith("docker exec -it pgsql sh -c '")
    assert plan.commands[0].endswith("> src-snapshot/primary.sql")


def test_ensure_snapshot_dir_creates_parents(tmp_path: Path) -> None:
    out_dir = tmp_path / "a" / "b" / "src-snapshot"

    assert ensure_snapshot_dir(out_dir) is None
    assert out_dir.is_dir()
    # Existing directory is fine
    assert ensure_snapshot_dir(out_dir) is None


def test_ensure_snapshot_dir_returns_error(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("x")

    error = ensure_snapshot_dir(blocker / "src-snapshot")

    assert isinstance(error, OSError)
