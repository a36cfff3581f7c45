"""Commit driver for commitment.

Ties the repository checks, message composition and the commit itself
together:

    repo root -> uncommitted changes? -> branch -> compose -> stage -> commit
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from commitment.config import CommitConfig
from commitment.git import (
    NoChangesError,
    create_commit,
    current_branch_name,
    get_repo_root,
    has_uncommitted_changes,
    stage_all,
)
from commitment.message import compose


@dataclass
class CommitResult:
    """Outcome of a commit run."""

    message: str
    branch: str
    # None on a dry run, or when the new commit's hash could not be read
    sha: Optional[str] = None


def run_commit(raw_message: str, config: Optional[CommitConfig] = None) -> CommitResult:
    """Compose a ticket-prefixed message and commit with it.

    Args:
        raw_message: Message text as typed by the user.
        config: Run options. Defaults to staging everything and committing.

    Returns:
        The composed message, the branch it came from and the new commit's
        hash (None on a dry run).

    Raises:
        RepositoryAccessError: If the repository or branch cannot be read.
        NoChangesError: If there is nothing to commit.
        CommitError: If staging or committing fails.
    """
    config = config or CommitConfig()

    repo_root = get_repo_root()
    if not has_uncommitted_changes():
        raise NoChangesError(f"No uncommitted changes found in {repo_root}")

    branch = current_branch_name()
    message = compose(branch, raw_message)
    logger.debug("Composed message {!r} on branch {}", message, branch)

    if config.dry_run:
        return CommitResult(message=message, branch=branch)

    if config.stage_all:
        stage_all()
    sha = create_commit(message)
    return CommitResult(message=message, branch=branch, sha=sha)
