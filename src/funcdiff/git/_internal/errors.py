"""Centralized error mapping for pygit2 exceptions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

import pygit2

from funcdiff.git.errors import GitError


class ErrorMapper:
    """Maps pygit2 exceptions to domain errors."""

    @staticmethod
    @contextmanager
    def guard(operation: str) -> Iterator[None]:
        """Context manager for consistent exception translation."""
        try:
            yield
        except pygit2.GitError as e:
            raise GitError(f"{operation} failed: {e}") from e


def git_operation(operation: str) -> AbstractContextManager[None]:
    """Wrap a block so pygit2 failures surface as GitError."""
    return ErrorMapper.guard(operation)
