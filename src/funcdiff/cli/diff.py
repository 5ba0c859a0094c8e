"""funcdiff diff command - compare declarations between two revisions."""

from pathlib import Path

import click

from funcdiff.cli.utils import cli_errors, load_run_config, open_repo, set_flags
from funcdiff.config.constants import DEFAULT_FROM_REF, DEFAULT_TO_REF
from funcdiff.core.progress import pluralize, status
from funcdiff.diff.engine import compute_diff
from funcdiff.diff.sources import build_inventory
from funcdiff.parsing.registry import default_registry
from funcdiff.report.render import render_report
from funcdiff.report.staging import commit_artifacts


@click.command()
@click.option(
    "--dir",
    "repo_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Path to the git repository (default: current directory).",
)
@click.option(
    "--from",
    "from_ref",
    default=DEFAULT_FROM_REF,
    show_default=True,
    help="Revision to compare from (branch, tag or commit).",
)
@click.option(
    "--to",
    "to_ref",
    default=DEFAULT_TO_REF,
    show_default=True,
    help="Revision to compare to (branch, tag or commit).",
)
@click.option("--only-exported", is_flag=True, help="Only exported functions and methods.")
@click.option(
    "--summary-only",
    is_flag=True,
    help="Only totals and the per-package table, no listings.",
)
@click.option(
    "--package",
    "package_filter",
    default=None,
    help="Only packages whose path contains this substring (e.g. 'internal/').",
)
@click.option(
    "--out-dir",
    default=None,
    help="Write one Markdown report per changed function into this directory "
    "(relative paths are resolved against the repository root).",
)
@click.pass_context
def diff_command(
    ctx: click.Context,
    repo_dir: Path | None,
    from_ref: str,
    to_ref: str,
    only_exported: bool,
    summary_only: bool,
    package_filter: str | None,
    out_dir: str | None,
) -> None:
    """Print a Markdown report of new, removed and changed functions.

    New functions exist only in --from, removed functions only in --to.
    """
    with cli_errors():
        git = open_repo(repo_dir)
        config = load_run_config(
            ctx,
            git.path,
            snapshot=set_flags(exported_only=only_exported, package_filter=package_filter),
            report=set_flags(summary_only=summary_only, out_dir=out_dir),
        )

        registry = default_registry()
        snapshot_options = config.snapshot.model_dump()
        from_inventory = build_inventory(git, from_ref, registry, **snapshot_options)
        to_inventory = build_inventory(git, to_ref, registry, **snapshot_options)

        result = compute_diff(from_inventory, to_inventory)
        report = render_report(from_ref, to_ref, result, config.report, git.read_text)

        if config.report.out_dir:
            # Created even when there is nothing to write
            commit_artifacts(git.path / config.report.out_dir, report.artifacts)
        if report.artifacts:
            status(
                f"Wrote {pluralize(len(report.artifacts), 'report')} to {config.report.out_dir}",
                style="success",
            )

    click.echo(report.summary, nl=False)
