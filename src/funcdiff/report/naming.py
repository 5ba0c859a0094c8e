"""Artifact file naming.

Names are ``<safe path>__<receiver>__<name>.md`` (receiver omitted for free
functions). When two artifacts of one run sanitize to the same name, each of
them gets a ``~<hex>`` suffix derived from its identity key, so the outcome
depends only on the set of keys being named.

Overlong names are cut and tagged with the same kind of digest so they stay
within file system name limits.
"""

from __future__ import annotations

import hashlib
import re
from collections import defaultdict
from collections.abc import Iterable

from funcdiff.config.constants import ARTIFACT_SUFFIX, MAX_NAME_STEM_BYTES, NAME_COLLISION_HEX
from funcdiff.core.errors import InternalError
from funcdiff.diff.models import DeclarationRecord, DeclKey

_UNSAFE = re.compile(r"[^A-Za-z0-9._-]")


def sanitize(part: str) -> str:
    part = part.replace("*", "ptr").replace("/", "_").replace("\\", "_")
    return _UNSAFE.sub("_", part)


def base_name(record: DeclarationRecord, *, identical: bool = False, prefix: str = "") -> str:
    """File name for record's artifact, capped at ``MAX_NAME_STEM_BYTES`` before suffixes."""
    parts = [sanitize(record.file)]
    if record.receiver:
        parts.append(sanitize(record.receiver))
    parts.append(sanitize(record.name))
    stem = "__".join(parts)
    if identical:
        stem = f"{prefix}{stem}"

    raw = stem.encode("utf-8")
    if len(raw) > MAX_NAME_STEM_BYTES:
        cut = raw[:MAX_NAME_STEM_BYTES].decode("utf-8", errors="ignore")
        stem = f"{cut}~{key_digest(record.key)}"
    return stem + ARTIFACT_SUFFIX


def key_digest(key: DeclKey) -> str:
    return hashlib.sha1("\x1f".join(key).encode("utf-8")).hexdigest()[:NAME_COLLISION_HEX]


def assign_names(candidates: Iterable[tuple[DeclKey, str]]) -> dict[DeclKey, str]:
    """Resolve base names to unique file names.

    Args:
        candidates: (identity key, base name) pairs, one per artifact.

    Returns:
        Identity key -> final file name.
    """
    by_name: dict[str, list[DeclKey]] = defaultdict(list)
    for key, name in candidates:
        by_name[name].append(key)

    assigned: dict[DeclKey, str] = {}
    for name, keys in by_name.items():
        if len(keys) == 1:
            assigned[keys[0]] = name
            continue
        stem = name.removesuffix(ARTIFACT_SUFFIX)
        for key in keys:
            assigned[key] = f"{stem}~{key_digest(key)}{ARTIFACT_SUFFIX}"

    if len(set(assigned.values())) != len(assigned):
        raise InternalError.unexpected("artifact names still collide after disambiguation")
    return assigned
