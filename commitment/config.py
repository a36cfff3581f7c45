"""Run options for commitment."""

from dataclasses import dataclass


@dataclass
class CommitConfig:
    """Options for a single commit run."""

    # Print the composed message instead of committing
    dry_run: bool = False
    # Stage the whole working tree before committing
    stage_all: bool = True
