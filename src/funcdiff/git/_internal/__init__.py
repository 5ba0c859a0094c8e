"""Internal helpers for git operations."""

from funcdiff.git._internal.access import RepoAccess
from funcdiff.git._internal.errors import ErrorMapper, git_operation

__all__ = ["RepoAccess", "ErrorMapper", "git_operation"]
