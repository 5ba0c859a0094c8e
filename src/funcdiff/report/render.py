"""Top-level report rendering: one call from a DiffResult to a Report."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from funcdiff.config.models import ReportConfig
from funcdiff.diff.models import DiffResult
from funcdiff.report.artifacts import Artifact, ReadSource, SourceCache, render_artifact
from funcdiff.report.markdown import render_summary
from funcdiff.report.naming import assign_names, base_name
from funcdiff.report.normalize import bodies_identical

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Report:
    """Rendered output of one run. Nothing has been written yet."""

    summary: str
    artifacts: list[Artifact] = field(default_factory=list)


def render_artifacts(
    from_ref: str,
    to_ref: str,
    diff: DiffResult,
    read_source: ReadSource,
    options: ReportConfig,
) -> list[Artifact]:
    """One artifact per changed pair, named and sorted by file name."""
    sources = SourceCache(read_source)
    drafts = []
    for pair in diff.changed:
        from_body = sources.body(from_ref, pair.from_decl)
        to_body = sources.body(to_ref, pair.to_decl)
        identical = bodies_identical(from_body, to_body)
        content = render_artifact(
            from_ref, to_ref, pair, from_body, to_body, fingerprint=options.fingerprint
        )
        name = base_name(pair.from_decl, identical=identical, prefix=options.identical_prefix)
        drafts.append((pair.key, name, content, identical))

    names = assign_names((key, name) for key, name, _, _ in drafts)
    artifacts = [
        Artifact(key=key, name=names[key], content=content, identical=identical)
        for key, _, content, identical in drafts
    ]
    return sorted(artifacts, key=lambda a: a.name)


def render_report(
    from_ref: str,
    to_ref: str,
    diff: DiffResult,
    options: ReportConfig,
    read_source: ReadSource,
) -> Report:
    """Render the summary and, when options.out_dir is set, the artifacts it indexes."""
    artifacts: list[Artifact] = []
    if options.out_dir and diff.changed:
        artifacts = render_artifacts(from_ref, to_ref, diff, read_source, options)
        log.debug("artifacts_rendered", count=len(artifacts))

    summary = render_summary(
        from_ref,
        to_ref,
        diff,
        summary_only=options.summary_only,
        out_dir=options.out_dir,
        artifact_names=[a.name for a in artifacts],
    )
    return Report(summary=summary, artifacts=artifacts)
