"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages and
provides a small builder for throwaway git repositories.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pygit2
import pytest
import structlog

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


class RepoBuilder:
    """Commits file snapshots onto named branches of a fresh repository."""

    def __init__(self, path: Path) -> None:
        self.path = path
        path.mkdir(parents=True, exist_ok=True)
        self.repo = pygit2.init_repository(str(path), initial_head="master")
        self.repo.config["user.name"] = "Test User"
        self.repo.config["user.email"] = "test@example.com"
        self.sig = pygit2.Signature("Test User", "test@example.com")

    def commit(
        self,
        files: dict[str, str | bytes | None],
        *,
        branch: str = "master",
        message: str = "update",
    ) -> str:
        """Write files (None deletes) and commit the whole index onto branch."""
        for rel, content in files.items():
            target = self.path / rel
            if content is None:
                target.unlink()
                self.repo.index.remove(rel)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content)
            self.repo.index.add(rel)
        self.repo.index.write()
        tree = self.repo.index.write_tree()

        ref = f"refs/heads/{branch}"
        parents = [self.repo.references[ref].target] if ref in self.repo.references else []
        oid = self.repo.create_commit(ref, self.sig, self.sig, message, tree, parents)
        return str(oid)

    def branch(self, name: str, source: str = "master") -> None:
        commit = self.repo.revparse_single(source)
        self.repo.branches.local.create(name, commit)  # type: ignore[arg-type]

    def tag(self, name: str, source: str = "master") -> None:
        target = self.repo.revparse_single(source).id
        self.repo.references.create(f"refs/tags/{name}", target)


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Empty repository at tmp_path/repo with HEAD on master."""
    return RepoBuilder(tmp_path / "repo")


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI tests."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
