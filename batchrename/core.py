"""
Core data model for the batch rename tool.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
import os
from pathlib import Path
import stat as stat_module
from typing import Any

import yaml


class ItemType(Enum):
    """Which kind of directory entry takes part in a listing."""

    FILES = "files"
    FOLDERS = "folders"


class SortKey(Enum):
    """Supported sort orders (always ascending)."""

    NAME = "name"
    DATE = "date"
    SIZE = "size"


class PatternKind(Enum):
    """Supported renaming patterns."""

    PREFIX = "prefix"
    SUFFIX = "suffix"
    NUMBERING = "numbering"


class OutcomeStatus(Enum):
    """Tag carried by engine results."""

    SUCCESS = "success"
    EMPTY = "empty"
    FATAL = "fatal"


@dataclass
class Entry:
    """One directory entry with its stat-derived metadata."""

    name: str
    kind: ItemType
    size: int
    mtime: float

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "Entry":
        kind = ItemType.FOLDERS if stat_module.S_ISDIR(st.st_mode) else ItemType.FILES
        return cls(name=name, kind=kind, size=st.st_size, mtime=st.st_mtime)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass
class PatternSpec:
    """A renaming pattern plus the user's term."""

    kind: PatternKind
    term: str | None = None

    @property
    def needs_term(self) -> bool:
        return self.kind in (PatternKind.PREFIX, PatternKind.SUFFIX)


@dataclass(frozen=True)
class OrderedSelection(Sequence[str]):
    """Names picked by the user, in the order numbering must follow.

    The pattern generator only accepts this type, so callers have to make
    an explicit decision about ordering before names reach it.
    """

    names: tuple[str, ...] = ()

    @classmethod
    def of(cls, names: Iterable[str]) -> "OrderedSelection":
        return cls(names=tuple(names))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return OrderedSelection(self.names[index])
        return self.names[index]

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)


@dataclass
class RenameOp:
    """A single planned rename inside one directory."""

    old_name: str
    new_name: str

    @property
    def is_noop(self) -> bool:
        return self.old_name == self.new_name

    def paths(self, base_dir: Path) -> tuple[Path, Path]:
        return base_dir / self.old_name, base_dir / self.new_name


@dataclass
class RenameResult:
    """Outcome of applying one RenameOp."""

    op: RenameOp
    success: bool
    error: str | None = None


@dataclass
class ListingResult:
    """Result of listing a directory."""

    status: OutcomeStatus
    names: list[str] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def success(cls, names: list[str]) -> "ListingResult":
        return cls(OutcomeStatus.SUCCESS, names=names)

    @classmethod
    def empty(cls, message: str) -> "ListingResult":
        return cls(OutcomeStatus.EMPTY, message=message)

    @classmethod
    def fatal(cls, message: str) -> "ListingResult":
        return cls(OutcomeStatus.FATAL, message=message)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


@dataclass
class PlanResult:
    """Result of generating a rename batch."""

    status: OutcomeStatus
    ops: list[RenameOp] = field(default_factory=list)
    message: str | None = None

    @classmethod
    def success(cls, ops: list[RenameOp]) -> "PlanResult":
        return cls(OutcomeStatus.SUCCESS, ops=ops)

    @classmethod
    def empty(cls, message: str) -> "PlanResult":
        return cls(OutcomeStatus.EMPTY, message=message)

    @classmethod
    def fatal(cls, message: str) -> "PlanResult":
        return cls(OutcomeStatus.FATAL, message=message)

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class Config:
    """User configuration for the batch rename tool."""

    include_hidden: bool = True
    sort_by_default: bool = False
    prevent_collisions: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        known = {"include_hidden", "sort_by_default", "prevent_collisions"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ConfigError(f"Config key '{key}' must be true or false")
        return cls(**data)

    @classmethod
    def from_file(cls, config_path: str | Path) -> "Config":
        """Load configuration from YAML file."""
        with open(config_path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping")
        return cls.from_dict(data)
