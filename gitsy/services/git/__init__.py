"""Git-related services for gitsy."""

from .repository import find_repo_root
from .worktrees import (
    GitWorktreeGateway,
    WorktreeGateway,
    is_within,
    parse_worktree_list,
)

__all__ = [
    "GitWorktreeGateway",
    "WorktreeGateway",
    "find_repo_root",
    "is_within",
    "parse_worktree_list",
]
