# topmark:header:start
#
#   project      : tomlio
#   file         : models.py
#   file_relpath : tests/models.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Dataclasses used as decode destinations in tests.

Defined at module level so their type hints resolve.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Mode(Enum):
    """Run mode."""

    DEV = "dev"
    PROD = "prod"


@dataclass
class Server:
    """Nested table."""

    host: str = "localhost"
    port: int = 8080


@dataclass
class Settings:
    """Top-level destination."""

    name: str = "default"
    ratio: float = 1.0
    debug: bool = False
    tags: list[str] = field(default_factory=list)
    server: Server = field(default_factory=Server)
    backup: Server | None = None
    mode: Mode = Mode.DEV
    root: Path | None = None
    started: dt.date | None = None


@dataclass(frozen=True)
class FrozenSettings:
    """Frozen dataclasses cannot be populated in place."""

    name: str = "default"


@dataclass
class Ports:
    """Container-typed fields."""

    ports: list[int] = field(default_factory=list)
    pair: tuple[int, str] | None = None
    limits: dict[str, int] | None = None


class Plain:
    """Non-dataclass destination."""

    def __init__(self) -> None:
        self.name: str = "default"
        self.extra: dict[str, int] = {}


@dataclass
class Limits:
    """Mapping field with a parameterized hint and a default factory."""

    limits: dict[str, int] = field(default_factory=dict)
    labels: dict = field(default_factory=dict)  # type: ignore[type-arg]
