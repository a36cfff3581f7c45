"""Git branch utilities.

Contains:
- current_branch_name: Get the name of the checked-out branch
"""

from loguru import logger

from commitment.git.exceptions import GitError, RepositoryAccessError
from commitment.git.runner import _run_git_command

DETACHED_HEAD = "HEAD"


def current_branch_name() -> str:
    """Get the current branch name.

    Works on unborn branches (no commits yet) as well.

    Returns:
        The current branch name, or 'HEAD' if in detached state.

    Raises:
        RepositoryAccessError: If the branch cannot be read.
    """
    try:
        branch = _run_git_command(["branch", "--show-current"])
    except GitError as e:
        raise RepositoryAccessError(f"Could not read branch name: {e}")
    if not branch:
        logger.debug("Detached HEAD, no branch name available")
        return DETACHED_HEAD
    return branch
