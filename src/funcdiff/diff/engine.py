"""Pure declaration diff engine.

Compares two inventories (from vs to) keyed by ``DeclKey`` and classifies
every key. No git or parser access.

Classification:
- new: key only in the "from" inventory
- removed: key only in the "to" inventory
- changed: key in both, signature or location differs
- unchanged: key in both, nothing differs (not reported)
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog

from funcdiff.diff.models import (
    ChangedPair,
    Classification,
    DeclarationRecord,
    DeclKey,
    DiffResult,
    PackageStats,
)

log = structlog.get_logger(__name__)

Declarations = Mapping[DeclKey, DeclarationRecord]


def compute_diff(from_decls: Declarations, to_decls: Declarations) -> DiffResult:
    """Diff two inventories.

    New and changed declarations are counted under their from-side package,
    removed declarations under their to-side package.
    """
    new: list[DeclarationRecord] = []
    removed: list[DeclarationRecord] = []
    changed: list[ChangedPair] = []
    counters: dict[str, dict[str, int]] = {}

    def bump(package: str, bucket: str) -> None:
        counts = counters.setdefault(package, {"new": 0, "removed": 0, "changed": 0})
        counts[bucket] += 1

    for key in sorted(from_decls):
        decl = from_decls[key]
        other = to_decls.get(key)
        if other is None:
            new.append(decl)
            bump(decl.package, "new")
        elif is_changed(decl, other):
            changed.append(ChangedPair(decl, other))
            bump(decl.package, "changed")

    for key in sorted(to_decls):
        if key not in from_decls:
            decl = to_decls[key]
            removed.append(decl)
            bump(decl.package, "removed")

    result = DiffResult(
        new=tuple(new),
        removed=tuple(removed),
        changed=tuple(changed),
        package_stats={pkg: PackageStats(**counters[pkg]) for pkg in sorted(counters)},
        from_total=len(from_decls),
        to_total=len(to_decls),
    )
    log.debug(
        "diff_computed",
        new=len(result.new),
        removed=len(result.removed),
        changed=len(result.changed),
        packages=len(result.package_stats),
    )
    return result


def is_changed(a: DeclarationRecord, b: DeclarationRecord) -> bool:
    """Signature text or location differs."""
    return (
        a.signature != b.signature
        or a.file != b.file
        or a.start_line != b.start_line
        or a.end_line != b.end_line
    )


def classify(
    key: DeclKey, from_decls: Declarations, to_decls: Declarations
) -> Classification | None:
    """Bucket a single key. None when the key is in neither inventory."""
    a = from_decls.get(key)
    b = to_decls.get(key)
    if a is None and b is None:
        return None
    if b is None:
        return "new"
    if a is None:
        return "removed"
    return "changed" if is_changed(a, b) else "unchanged"
