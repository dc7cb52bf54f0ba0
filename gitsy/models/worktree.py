"""Worktree data models."""

from dataclasses import dataclass


@dataclass
class WorktreeInfo:
    """Information about a git worktree."""

    path: str
    branch_name: str  # Empty for detached HEAD or bare entries
    commit_sha: str = ""

    @property
    def has_branch(self) -> bool:
        return bool(self.branch_name)

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch_name or "(detached)"
        return f"{branch} @ {self.path}"
