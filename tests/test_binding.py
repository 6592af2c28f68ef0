# topmark:header:start
#
#   project      : tomlio
#   file         : test_binding.py
#   file_relpath : tests/test_binding.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Tests for binding decoded tables into destinations (`tomlio.binding`)."""

from __future__ import annotations

import datetime as dt
from pathlib import Path
from typing import Any

import pytest

from tests.models import FrozenSettings, Limits, Mode, Plain, Ports, Server, Settings
from tomlio.binding import bind, commit, stage, to_table
from tomlio.errors import BindingError


def test_bind_mapping_merges_nested_tables() -> None:
    """Nested tables merge into existing mappings instead of replacing them."""
    dest: dict[str, Any] = {"server": {"host": "h", "port": 1}, "keep": True}
    bind(dest, {"server": {"port": 2}, "name": "svc"})

    assert dest == {"server": {"host": "h", "port": 2}, "keep": True, "name": "svc"}


def test_bind_dataclass_converts_by_type_hint() -> None:
    """Field hints drive conversion of enums, paths, floats and dates."""
    dest = Settings()
    bind(
        dest,
        {
            "ratio": 2,
            "mode": "prod",
            "root": "/srv/app",
            "started": dt.date(2025, 1, 2),
            "server": {"port": 9000},
        },
    )

    assert dest.ratio == 2.0
    assert isinstance(dest.ratio, float)
    assert dest.mode is Mode.PROD
    assert dest.root == Path("/srv/app")
    assert dest.started == dt.date(2025, 1, 2)
    assert dest.server == Server("localhost", 9000)


def test_bind_dataclass_builds_optional_nested_dataclass() -> None:
    """An unset Optional[dataclass] field is built from its table."""
    dest = Settings()
    bind(dest, {"backup": {"host": "b"}})

    assert dest.backup == Server("b", 8080)


def test_bind_dataclass_ignores_unknown_keys() -> None:
    """Keys without a matching field are skipped."""
    dest = Settings()
    bind(dest, {"unknown": 1, "name": "svc"})

    assert dest.name == "svc"
    assert not hasattr(dest, "unknown")


@pytest.mark.parametrize(
    ("table", "where"),
    [
        ({"name": 1}, "name"),
        ({"debug": 1}, "debug"),
        ({"server": {"port": True}}, "server.port"),
        ({"tags": ["a", 2]}, r"tags\[1\]"),
        ({"mode": "staging"}, "mode"),
        ({"backup": "nope"}, "backup"),
    ],
)
def test_bind_dataclass_rejects_mismatches(table: dict[str, Any], where: str) -> None:
    """Type mismatches name the offending key."""
    with pytest.raises(BindingError, match=where):
        bind(Settings(), table)


def test_bind_container_hints() -> None:
    """list, tuple and dict hints check their items."""
    dest = Ports()
    bind(dest, {"ports": [1, 2], "pair": [1, "a"], "limits": {"cpu": 2}})

    assert dest.ports == [1, 2]
    assert dest.pair == (1, "a")
    assert dest.limits == {"cpu": 2}

    with pytest.raises(BindingError):
        bind(Ports(), {"pair": [1, 2, 3]})
    with pytest.raises(BindingError):
        bind(Ports(), {"limits": {"cpu": "two"}})


def test_bind_frozen_dataclass_is_rejected() -> None:
    """Frozen dataclasses cannot be populated in place."""
    with pytest.raises(BindingError, match="frozen"):
        bind(FrozenSettings(), {"name": "svc"})


def test_bind_plain_object_sets_attributes() -> None:
    """Plain objects receive attributes; nested mappings merge."""
    dest = Plain()
    bind(dest, {"name": "svc", "extra": {"a": 1}})

    assert dest.name == "svc"
    assert dest.extra == {"a": 1}


def test_bind_rejects_scalars() -> None:
    """Immutable destinations cannot be decoded into."""
    with pytest.raises(BindingError):
        bind(42, {"a": 1})


def test_stage_and_commit_publish_in_one_step() -> None:
    """Changes to the staged copy are invisible until commit."""
    dest = Settings()
    staged = stage(dest)
    bind(staged, {"name": "svc", "server": {"port": 1}})

    assert dest == Settings()
    commit(dest, staged)
    assert dest.name == "svc"
    assert dest.server.port == 1


def test_commit_mapping_replaces_content() -> None:
    """Committing a mapping makes it equal to the staged copy."""
    dest: dict[str, Any] = {"a": 1}
    staged = stage(dest)
    staged["b"] = 2
    commit(dest, staged)

    assert dest == {"a": 1, "b": 2}


def test_to_table_from_dataclass() -> None:
    """Dataclasses convert to plain dicts without None entries."""
    table = to_table(Settings(tags=["x", None], root=Path("/srv")))  # type: ignore[list-item]

    assert table["tags"] == ["x"]
    assert table["root"] == str(Path("/srv"))
    assert table["mode"] == "dev"
    assert "backup" not in table


def test_to_table_rejects_non_tables() -> None:
    """Scalars and lists are not tables."""
    with pytest.raises(BindingError):
        to_table([1, 2])


def test_bind_existing_mapping_field_checks_value_hint() -> None:
    """A dict[str, int] field with a default dict still checks its values."""
    with pytest.raises(BindingError, match="limits.cpu"):
        bind(Limits(), {"limits": {"cpu": "lots"}})


def test_bind_existing_mapping_field_merges_checked_values() -> None:
    """Valid values merge into the existing dict; bare dict hints accept anything."""
    dest = Limits(limits={"mem": 1})
    bind(dest, {"limits": {"cpu": 2}, "labels": {"team": "core", "tier": 1}})

    assert dest.limits == {"mem": 1, "cpu": 2}
    assert dest.labels == {"team": "core", "tier": 1}


def test_commit_updates_nested_objects_in_place() -> None:
    """References to nested dataclasses and dicts taken before a load see the new values."""
    dest = Settings()
    limits = Limits(limits={"mem": 1})
    server = dest.server
    staged = stage(dest)
    bind(staged, {"server": {"port": 9000}})
    commit(dest, staged)

    assert dest.server is server
    assert server.port == 9000

    staged_limits = stage(limits)
    bind(staged_limits, {"limits": {"cpu": 2}})
    kept = limits.limits
    commit(limits, staged_limits)

    assert limits.limits is kept
    assert kept == {"mem": 1, "cpu": 2}


def test_commit_mapping_drops_keys_missing_from_stage() -> None:
    """Committing a mapping removes keys the staged copy no longer has."""
    nested: dict[str, Any] = {"x": 1}
    dest: dict[str, Any] = {"a": 1, "nested": nested}
    staged = stage(dest)
    del staged["a"]
    staged["nested"]["y"] = 2
    commit(dest, staged)

    assert dest == {"nested": {"x": 1, "y": 2}}
    assert dest["nested"] is nested
