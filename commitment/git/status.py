"""Git status utilities.

Contains:
- get_status: Get git status output in porcelain format
- has_uncommitted_changes: Whether the working tree differs from HEAD
"""

from commitment.git.exceptions import GitError, RepositoryAccessError
from commitment.git.runner import _run_git_command


def get_status() -> str:
    """Get git status output in porcelain format.

    Untracked files are listed individually, including those inside
    untracked directories.

    Returns:
        The git status output.

    Raises:
        RepositoryAccessError: If the status cannot be read.
    """
    try:
        return _run_git_command(["status", "--porcelain=v1", "--untracked-files=all"])
    except GitError as e:
        raise RepositoryAccessError(f"Failed to get statuses: {e}")


def has_uncommitted_changes() -> bool:
    """Check for staged, unstaged or untracked changes.

    Ignored files do not count.

    Returns:
        True if anything in the working tree could be committed.
    """
    return any(line.strip() for line in get_status().split("\n"))
