"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import click
import structlog

from funcdiff.config.loader import load_config
from funcdiff.config.models import FuncDiffConfig
from funcdiff.core.errors import FuncDiffError
from funcdiff.core.logging import configure_logging
from funcdiff.git.errors import GitError, NotARepositoryError
from funcdiff.git.ops import GitOps

log = structlog.get_logger(__name__)


def open_repo(repo_dir: Path | None = None) -> GitOps:
    """Open the git repository containing repo_dir (default: current directory).

    Raises:
        click.ClickException: If not inside a git repository
    """
    start = (repo_dir or Path.cwd()).resolve()
    try:
        return GitOps(start)
    except NotARepositoryError as e:
        raise click.ClickException(
            f"Not inside a git repository: {start}\n"
            "Run funcdiff from within a repository, or pass one with --dir."
        ) from e


def set_flags(**flags: Any) -> dict[str, Any]:
    """Keep only flags the user actually set, so config files still apply."""
    return {k: v for k, v in flags.items() if v is not None and v is not False}


def load_run_config(
    ctx: click.Context, repo_root: Path, **sections: dict[str, Any]
) -> FuncDiffConfig:
    """Load config for repo_root with CLI flag overrides, then apply its logging section.

    ``--verbose`` on the command group wins over any configured log level.
    """
    overrides = {name: values for name, values in sections.items() if values}
    config = load_config(repo_root, **overrides)
    logging_config = config.logging
    if ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    log.debug("config_loaded", repo=str(repo_root), overrides=sorted(overrides))
    return config


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn run-level failures into click errors (message on stderr, exit code 1)."""
    try:
        yield
    except (FuncDiffError, GitError) as e:
        log.debug("run_failed", error=str(e), error_type=type(e).__name__)
        raise click.ClickException(str(e)) from e
