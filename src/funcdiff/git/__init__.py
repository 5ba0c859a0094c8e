"""Git operations module."""

from funcdiff.git.errors import (
    GitError,
    NotARepositoryError,
    PathNotFoundError,
    RefNotFoundError,
)
from funcdiff.git.models import RevisionInfo
from funcdiff.git.ops import GitOps

__all__ = [
    "GitOps",
    "RevisionInfo",
    "GitError",
    "NotARepositoryError",
    "RefNotFoundError",
    "PathNotFoundError",
]
