"""Git staging and commit utilities.

Contains:
- stage_all: Stage every change in the working tree
- create_commit: Commit the index with a message
"""

from typing import Optional

from loguru import logger

from commitment.git.exceptions import CommitError, GitError
from commitment.git.runner import _run_git_command


def stage_all() -> None:
    """Stage all changes, including deletions and untracked files.

    Raises:
        CommitError: If `git add` fails.
    """
    try:
        _run_git_command(["add", "--all"])
    except GitError as e:
        raise CommitError(f"Failed to run `git add`: {e}")


def create_commit(message: str) -> Optional[str]:
    """Commit the current index.

    Author, committer and parent come from the repository configuration;
    on an unborn branch this creates the initial commit.

    Args:
        message: The full commit message.

    Returns:
        The abbreviated hash of the new commit, or None if the commit was
        created but its hash could not be read.

    Raises:
        CommitError: If the message is empty or `git commit` fails.
    """
    if not message.strip():
        raise CommitError("Commit message is empty.")

    try:
        _run_git_command(["commit", "--quiet", "-m", message])
    except GitError as e:
        raise CommitError(f"Failed to commit: {e}")

    try:
        sha = _run_git_command(["rev-parse", "--short", "HEAD"])
    except GitError as e:
        logger.warning("Commit created, but its hash could not be read: {}", e)
        return None

    logger.info("Created commit {}: {}", sha, message)
    return sha
