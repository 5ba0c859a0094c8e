"""Git operations via pygit2 - read-only snapshot access to named revisions."""

from __future__ import annotations

from pathlib import Path

import pygit2

from funcdiff.git._internal import RepoAccess
from funcdiff.git.models import RevisionInfo


class GitOps:
    """Thin wrapper around pygit2.Repository with cleaner error handling.

    Serves file lists and file contents of a revision. Resolved commits are
    cached per revision name for the lifetime of the instance.
    """

    def __init__(self, repo_path: Path | str) -> None:
        self._access = RepoAccess(repo_path)
        self._commits: dict[str, pygit2.Commit] = {}

    @property
    def path(self) -> Path:
        """Repository root path."""
        return self._access.path

    def _commit(self, revision: str) -> pygit2.Commit:
        commit = self._commits.get(revision)
        if commit is None:
            commit = self._access.resolve_commit(revision)
            self._commits[revision] = commit
        return commit

    def resolve(self, revision: str) -> RevisionInfo:
        """Resolve a branch, tag or commit name. Raises RefNotFoundError."""
        return RevisionInfo.from_pygit2(revision, self._commit(revision))

    def list_files(self, revision: str) -> list[str]:
        """All regular files at revision, as sorted POSIX paths."""
        commit = self._commit(revision)
        return sorted(self._access.iter_blob_paths(commit.tree))

    def read_file(self, revision: str, path: str) -> bytes:
        """Raw content of path at revision. Raises PathNotFoundError."""
        return self._access.blob_data(self._commit(revision), revision, path)

    def read_text(self, revision: str, path: str) -> str:
        """Content of path at revision decoded as UTF-8 (undecodable bytes replaced)."""
        return self.read_file(revision, path).decode("utf-8", errors="replace")
