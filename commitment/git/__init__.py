"""Git access for commitment.

This package wraps the git executable with:
- exceptions: GitError, NoChangesError, RepositoryAccessError, CommitError
- runner: _run_git_command, get_repo_root
- branch: current_branch_name
- status: get_status, has_uncommitted_changes
- commit: stage_all, create_commit
"""

# Exceptions
from commitment.git.exceptions import (
    CommitError,
    GitError,
    NoChangesError,
    RepositoryAccessError,
)

# Runner utilities
from commitment.git.runner import (
    _run_git_command,
    get_repo_root,
)

# Branch utilities
from commitment.git.branch import (
    DETACHED_HEAD,
    current_branch_name,
)

# Status utilities
from commitment.git.status import (
    get_status,
    has_uncommitted_changes,
)

# Commit utilities
from commitment.git.commit import (
    create_commit,
    stage_all,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoChangesError",
    "RepositoryAccessError",
    "CommitError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    # Branch
    "DETACHED_HEAD",
    "current_branch_name",
    # Status
    "get_status",
    "has_uncommitted_changes",
    # Commit
    "stage_all",
    "create_commit",
]
