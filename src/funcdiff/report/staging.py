"""Staged commit of rendered artifacts into the output directory.

All artifacts are written into a scratch directory inside the output
directory first; each is then moved into place with ``os.replace``, so a
reader never observes a partially written artifact.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from collections.abc import Sequence
from pathlib import Path

import structlog

from funcdiff.config.constants import SCRATCH_PREFIX
from funcdiff.core.errors import ReportError
from funcdiff.report.artifacts import Artifact

log = structlog.get_logger(__name__)


def commit_artifacts(out_dir: Path, artifacts: Sequence[Artifact]) -> list[Path]:
    """Write artifacts into out_dir. Returns the final paths, sorted.

    Raises:
        ReportError: out_dir cannot be created or written.
    """
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        scratch = Path(tempfile.mkdtemp(prefix=SCRATCH_PREFIX, dir=out_dir))
    except OSError as e:
        raise ReportError.output_unwritable(str(out_dir), str(e)) from e

    written: list[Path] = []
    try:
        for artifact in artifacts:
            (scratch / artifact.name).write_bytes(artifact.content.encode("utf-8"))
        for artifact in artifacts:
            target = out_dir / artifact.name
            os.replace(scratch / artifact.name, target)
            written.append(target)
    except OSError as e:
        raise ReportError.output_unwritable(str(out_dir), str(e)) from e
    finally:
        shutil.rmtree(scratch, ignore_errors=True)

    log.info("artifacts_committed", out_dir=str(out_dir), count=len(written))
    return sorted(written)
