"""Core state machines for gitsy."""

from .setup_flow import SetupFlow
from .worktree_manager import WorktreeManager

__all__ = ["SetupFlow", "WorktreeManager"]
