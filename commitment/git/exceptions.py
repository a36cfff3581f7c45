"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- NoChangesError: Raised when the working tree has nothing to commit
- RepositoryAccessError: Raised when the repository or branch cannot be read
- CommitError: Raised when staging or committing fails
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NoChangesError(GitError):
    """Raised when there are no uncommitted changes."""

    pass


class RepositoryAccessError(GitError):
    """Raised when the repository cannot be opened or its branch read."""

    pass


class CommitError(GitError):
    """Raised when the commit (or the staging before it) fails."""

    pass
