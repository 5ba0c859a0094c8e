"""Test fixtures for CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

CALC_MASTER = """package calc

func Add(a, b int) int {
	return a + b
}

func Sub(a, b int) int {
	return a - b
}
"""

CALC_DEVELOPMENT = """package calc

func Add(a, b, c int) int {
	return a + b + c
}

func Mul(a, b int) int {
	return a * b
}

func helper() {}
"""

APP_TS = """export function boot(port: number): void {
  listen(port);
}
"""


@pytest.fixture(autouse=True)
def _no_global_config(tmp_path: Path) -> Iterator[None]:
    """Keep the developer's ~/.config/funcdiff out of CLI runs."""
    with patch("funcdiff.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "global.yaml"):
        yield


@pytest.fixture
def sample_repo(repo_builder) -> Path:
    """master and development branches of a small Go + TypeScript project.

    Against master, development adds Mul, helper and boot, removes Sub and
    changes Add's signature.
    """
    repo_builder.commit(
        {
            "pkg/calc/calc.go": CALC_MASTER,
            "pkg/calc/calc_test.go": "package calc\n\nfunc TestAdd(t *T) {}\n",
            "README.md": "# calc\n",
        }
    )
    repo_builder.branch("development")
    repo_builder.commit(
        {"pkg/calc/calc.go": CALC_DEVELOPMENT, "web/app.ts": APP_TS},
        branch="development",
    )
    return repo_builder.path
