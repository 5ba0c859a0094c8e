"""Snapshot builder: turn one revision into a declaration inventory.

Files are read through a ``SnapshotProvider`` (``funcdiff.git.GitOps`` in
production) and parsed by an ``ExtractorRegistry``. Failures on a single file
are logged and the file is skipped; failures that concern the whole revision
propagate.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Protocol

import structlog

from funcdiff.core.errors import SnapshotError
from funcdiff.core.progress import progress
from funcdiff.diff.models import DeclarationRecord, Inventory
from funcdiff.git.errors import GitError, RefNotFoundError
from funcdiff.parsing.errors import ExtractionError

if TYPE_CHECKING:
    from funcdiff.config.models import DuplicateKeyPolicy
    from funcdiff.git.models import RevisionInfo
    from funcdiff.parsing.registry import ExtractorRegistry

log = structlog.get_logger(__name__)

_MB = 1024 * 1024


class SnapshotProvider(Protocol):
    """Read access to the files of a named revision."""

    def resolve(self, revision: str) -> RevisionInfo: ...

    def list_files(self, revision: str) -> list[str]: ...

    def read_file(self, revision: str, path: str) -> bytes: ...


def build_inventory(
    provider: SnapshotProvider,
    revision: str,
    registry: ExtractorRegistry,
    *,
    exported_only: bool = False,
    package_filter: str | None = None,
    duplicate_keys: DuplicateKeyPolicy = "disambiguate",
    max_file_size_mb: int = 10,
) -> Inventory:
    """Parse every eligible file at revision into an Inventory.

    Args:
        provider: Snapshot provider for the repository.
        revision: Branch, tag or commit name.
        registry: Extractor dispatch table.
        exported_only: Drop non-exported declarations.
        package_filter: Skip files whose package path does not contain this.
        duplicate_keys: Policy when two declarations share a key.
        max_file_size_mb: Skip files larger than this.

    Raises:
        RefNotFoundError: revision does not resolve to a commit.
        SnapshotError: duplicate key under the ``error`` policy.
    """
    info = provider.resolve(revision)
    paths = [p for p in provider.list_files(revision) if registry.is_eligible(p)]
    log.info("snapshot_started", revision=revision, sha=info.short_sha, files=len(paths))

    inventory = Inventory(revision=revision)
    max_bytes = max_file_size_mb * _MB

    for path in progress(paths, desc=f"Scanning {revision}"):
        try:
            content = provider.read_file(revision, path)
        except RefNotFoundError:
            raise
        except GitError as e:
            log.warning("file_skipped", revision=revision, path=path, error=str(e))
            inventory.files_skipped.append(path)
            continue

        if len(content) > max_bytes:
            log.warning(
                "file_too_large",
                revision=revision,
                path=path,
                size=len(content),
                limit_mb=max_file_size_mb,
            )
            inventory.files_skipped.append(path)
            continue

        try:
            records = registry.extract(path, content)
        except ExtractionError as e:
            log.warning("file_parse_failed", revision=revision, path=path, error=str(e))
            inventory.files_skipped.append(path)
            continue

        inventory.files_scanned += 1
        if package_filter and records and package_filter not in records[0].package:
            log.debug("file_filtered", path=path, package=records[0].package)
            continue

        for record in records:
            if exported_only and not record.exported:
                continue
            _insert(inventory, record, duplicate_keys)

    log.info(
        "snapshot_built",
        revision=revision,
        declarations=len(inventory),
        files_scanned=inventory.files_scanned,
        files_skipped=len(inventory.files_skipped),
    )
    return inventory


def _insert(inventory: Inventory, record: DeclarationRecord, policy: DuplicateKeyPolicy) -> None:
    key = record.key
    previous = inventory.records.get(key)
    if previous is None:
        inventory.records[key] = record
        return

    if policy == "error":
        raise SnapshotError.duplicate_key(
            inventory.revision, str(key), previous.span, record.span
        )

    log.warning(
        "duplicate_declaration_key",
        revision=inventory.revision,
        key=str(key),
        kept=previous.span if policy == "disambiguate" else record.span,
        other=record.span if policy == "disambiguate" else previous.span,
        policy=policy,
    )
    if policy == "overwrite":
        inventory.records[key] = record
        return

    tagged = dataclasses.replace(record, name=f"{record.name}@L{record.start_line}")
    if tagged.key in inventory.records:
        # same start line in another file of the package
        tagged = dataclasses.replace(
            record, name=f"{record.name}@{record.file}:L{record.start_line}"
        )
    inventory.records[tagged.key] = tagged
