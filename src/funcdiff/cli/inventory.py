"""funcdiff inventory command - list the declarations of one revision."""

import json
from pathlib import Path

import click

from funcdiff.cli.utils import cli_errors, load_run_config, open_repo, set_flags
from funcdiff.diff.sources import build_inventory
from funcdiff.parsing.registry import default_registry
from funcdiff.report.markdown import render_inventory


@click.command()
@click.argument("ref")
@click.option(
    "--dir",
    "repo_dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Path to the git repository (default: current directory).",
)
@click.option("--only-exported", is_flag=True, help="Only exported functions and methods.")
@click.option("--package", "package_filter", default=None, help="Package path substring filter.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def inventory_command(
    ctx: click.Context,
    ref: str,
    repo_dir: Path | None,
    only_exported: bool,
    package_filter: str | None,
    as_json: bool,
) -> None:
    """Show every function and method found at REF."""
    with cli_errors():
        git = open_repo(repo_dir)
        config = load_run_config(
            ctx,
            git.path,
            snapshot=set_flags(exported_only=only_exported, package_filter=package_filter),
        )
        inventory = build_inventory(git, ref, default_registry(), **config.snapshot.model_dump())

    if as_json:
        click.echo(
            json.dumps(
                {
                    "revision": inventory.revision,
                    "files_scanned": inventory.files_scanned,
                    "files_skipped": inventory.files_skipped,
                    "declarations": [
                        {
                            "package": r.package,
                            "receiver": r.receiver,
                            "name": r.name,
                            "kind": r.kind,
                            "language": r.language,
                            "signature": r.signature,
                            "exported": r.exported,
                            "file": r.file,
                            "start_line": r.start_line,
                            "end_line": r.end_line,
                            "line_count": r.line_count,
                        }
                        for r in inventory.values()
                    ],
                },
                indent=2,
            )
        )
        return

    click.echo(render_inventory(inventory), nl=False)
