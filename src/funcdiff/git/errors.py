"""Git module error types."""


class GitError(Exception):
    """Base error for git operations."""

    pass


class NotARepositoryError(GitError):
    """Path is not a git repository."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class RefNotFoundError(GitError):
    """Reference (branch, tag, commit) not found."""

    def __init__(self, ref: str) -> None:
        super().__init__(f"Reference not found: {ref}")
        self.ref = ref


class PathNotFoundError(GitError):
    """Path does not name a file at the given revision."""

    def __init__(self, revision: str, path: str) -> None:
        super().__init__(f"No file {path} at {revision}")
        self.revision = revision
        self.path = path
