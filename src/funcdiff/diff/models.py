"""Data models for function-level diffs.

All models are plain dataclasses / frozen dataclasses with no git or parser
coupling. The comparison unit is a ``DeclarationRecord``; records are matched
across revisions by ``DeclKey``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Literal, NamedTuple

Classification = Literal["new", "removed", "changed", "unchanged"]


class DeclKey(NamedTuple):
    """Identity key ``(package, receiver, name)``. Tuple order is report order."""

    package: str
    receiver: str
    name: str

    def __str__(self) -> str:
        return f"{self.package}:{qualified_name(self.receiver, self.name)}"


def qualified_name(receiver: str, name: str) -> str:
    """``(recv).name`` for methods, ``name`` for free functions."""
    return f"({receiver}).{name}" if receiver else name


@dataclass(frozen=True, slots=True)
class DeclarationRecord:
    """One function or method declaration at one revision."""

    package: str
    file: str
    name: str
    receiver: str
    signature: str
    exported: bool
    start_line: int
    end_line: int
    kind: str = "function"
    language: str = ""

    @property
    def key(self) -> DeclKey:
        return DeclKey(self.package, self.receiver, self.name)

    @property
    def line_count(self) -> int:
        return max(self.end_line - self.start_line + 1, 0)

    @property
    def qualified_name(self) -> str:
        return qualified_name(self.receiver, self.name)

    @property
    def span(self) -> str:
        """``file:start-end``, used in log events and error messages."""
        return f"{self.file}:{self.start_line}-{self.end_line}"


@dataclass(eq=False)
class Inventory(Mapping[DeclKey, DeclarationRecord]):
    """All declarations of one revision, keyed by identity.

    Iteration (and therefore ``keys()``, ``values()``, ``items()``) is always
    in sorted key order.
    """

    revision: str
    records: dict[DeclKey, DeclarationRecord] = field(default_factory=dict)
    files_scanned: int = 0
    files_skipped: list[str] = field(default_factory=list)

    @classmethod
    def from_records(cls, revision: str, records: list[DeclarationRecord]) -> Inventory:
        """Build an inventory directly; later records replace earlier ones on key clash."""
        return cls(revision=revision, records={r.key: r for r in records})

    def __getitem__(self, key: DeclKey) -> DeclarationRecord:
        return self.records[key]

    def __iter__(self) -> Iterator[DeclKey]:
        return iter(sorted(self.records))

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, key: object) -> bool:
        return key in self.records

    def packages(self) -> list[str]:
        return sorted({k.package for k in self.records})


@dataclass(frozen=True, slots=True)
class ChangedPair:
    """Same identity key on both sides, different signature or location."""

    from_decl: DeclarationRecord
    to_decl: DeclarationRecord

    @property
    def key(self) -> DeclKey:
        return self.from_decl.key

    @property
    def signature_changed(self) -> bool:
        return self.from_decl.signature != self.to_decl.signature


@dataclass(frozen=True, slots=True)
class PackageStats:
    """Per-package new/removed/changed counters."""

    new: int = 0
    removed: int = 0
    changed: int = 0

    @property
    def total(self) -> int:
        return self.new + self.removed + self.changed


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Output of ``compute_diff``. Every sequence is sorted by key."""

    new: tuple[DeclarationRecord, ...] = ()
    removed: tuple[DeclarationRecord, ...] = ()
    changed: tuple[ChangedPair, ...] = ()
    package_stats: Mapping[str, PackageStats] = field(default_factory=dict)
    from_total: int = 0
    to_total: int = 0

    @property
    def is_empty(self) -> bool:
        return not (self.new or self.removed or self.changed)

    def packages(self) -> list[str]:
        return sorted(self.package_stats)
