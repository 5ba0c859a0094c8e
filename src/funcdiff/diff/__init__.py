"""Declaration inventories and the diff engine."""

from funcdiff.diff.models import (
    ChangedPair,
    DeclarationRecord,
    DeclKey,
    DiffResult,
    Inventory,
    PackageStats,
)
from funcdiff.diff.engine import classify, compute_diff
from funcdiff.diff.sources import SnapshotProvider, build_inventory

__all__ = [
    "DeclarationRecord",
    "DeclKey",
    "Inventory",
    "ChangedPair",
    "PackageStats",
    "DiffResult",
    "compute_diff",
    "classify",
    "build_inventory",
    "SnapshotProvider",
]
