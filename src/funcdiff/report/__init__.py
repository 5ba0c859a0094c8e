"""Report rendering: summary document and per-declaration artifacts."""

from funcdiff.report.artifacts import Artifact, render_artifact
from funcdiff.report.markdown import render_summary
from funcdiff.report.normalize import bodies_identical, normalize_body
from funcdiff.report.render import Report, render_artifacts, render_report
from funcdiff.report.staging import commit_artifacts

__all__ = [
    "Report",
    "Artifact",
    "render_report",
    "render_artifacts",
    "render_artifact",
    "render_summary",
    "commit_artifacts",
    "normalize_body",
    "bodies_identical",
]
