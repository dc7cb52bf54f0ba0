"""Data models for gitsy."""

from .keys import KeyPress
from .state import (
    AppState,
    InputBuffer,
    MenuState,
    MessageKind,
    PendingDeletion,
    Screen,
    StatusMessage,
)
from .worktree import WorktreeInfo

__all__ = [
    "AppState",
    "InputBuffer",
    "KeyPress",
    "MenuState",
    "MessageKind",
    "PendingDeletion",
    "Screen",
    "StatusMessage",
    "WorktreeInfo",
]
