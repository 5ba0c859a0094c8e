"""Repository access layer - owns pygit2.Repository and exposes computed facts."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pygit2

from funcdiff.git._internal.errors import git_operation
from funcdiff.git.errors import NotARepositoryError, PathNotFoundError, RefNotFoundError


class RepoAccess:
    """Owns pygit2.Repository and provides normalized access to repo state."""

    def __init__(self, repo_path: Path | str) -> None:
        self._path = Path(repo_path)
        try:
            self._repo = pygit2.Repository(str(self._path))
        except pygit2.GitError as e:
            raise NotARepositoryError(str(self._path)) from e

    @property
    def repo(self) -> pygit2.Repository:
        return self._repo

    @property
    def path(self) -> Path:
        return Path(self._repo.workdir) if self._repo.workdir else self._path

    # =========================================================================
    # Ref Resolution
    # =========================================================================

    def resolve_ref_oid(self, ref: str) -> pygit2.Oid:
        try:
            obj, _ = self._repo.resolve_refish(ref)
            return obj.id
        except (pygit2.GitError, KeyError, ValueError) as e:
            raise RefNotFoundError(ref) from e

    def resolve_commit(self, ref: str) -> pygit2.Commit:
        obj: pygit2.Object | None = self._repo.get(self.resolve_ref_oid(ref))
        if isinstance(obj, pygit2.Tag):
            obj = obj.peel(pygit2.Commit)  # type: ignore[assignment]
        if not isinstance(obj, pygit2.Commit):
            raise RefNotFoundError(f"{ref} is not a commit")
        return obj

    # =========================================================================
    # Tree Access
    # =========================================================================

    def iter_blob_paths(self, tree: pygit2.Tree, prefix: str = "") -> Iterator[str]:
        """Yield POSIX paths of regular-file blobs under tree.

        Submodule entries and symlinks are not files of this repository and
        are skipped.
        """
        with git_operation("tree walk"):
            for entry in tree:
                path = f"{prefix}{entry.name}"
                if entry.type == pygit2.enums.ObjectType.TREE:
                    yield from self.iter_blob_paths(entry, f"{path}/")  # type: ignore[arg-type]
                elif (
                    entry.type == pygit2.enums.ObjectType.BLOB
                    and entry.filemode != pygit2.enums.FileMode.LINK
                ):
                    yield path

    def blob_data(self, commit: pygit2.Commit, ref: str, path: str) -> bytes:
        try:
            entry = commit.tree[path]
        except KeyError as e:
            raise PathNotFoundError(ref, path) from e
        with git_operation(f"read {path}"):
            blob = self._repo[entry.id]
        if not isinstance(blob, pygit2.Blob):
            raise PathNotFoundError(ref, path)
        data = blob.data
        if isinstance(data, memoryview):
            data = bytes(data)
        return data
