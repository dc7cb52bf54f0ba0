"""Message formatting utilities for gitsy."""

from gitsy.constants import CONFIRM_QUESTION
from gitsy.exceptions import GatewayError


def format_created_message(branch_name: str) -> str:
    return f"Successfully created worktree for branch '{branch_name}'"


def format_deleted_message(branch_name: str) -> str:
    return f"Successfully deleted worktree for branch '{branch_name}'"


def format_delete_failure(branch_name: str, error: GatewayError) -> str:
    """
    Format a failed removal so the branch is always named.

    Args:
        branch_name: Branch whose worktree was being removed
        error: The gateway failure

    Returns:
        Message text without the error marker
    """
    return f"Failed to delete worktree for branch '{branch_name}': {error}"


def format_sync_warning(branch_name: str, out_of_sync: bool) -> str:
    """
    Format the confirmation prompt shown before deleting a worktree.

    Args:
        branch_name: Branch about to be deleted
        out_of_sync: Whether the branch differs from its upstream

    Returns:
        Multi-line prompt ending with the y/N question
    """
    if out_of_sync:
        headline = f"WARNING: Branch '{branch_name}' is NOT in sync with origin!"
    else:
        headline = f"Branch '{branch_name}' is in sync with origin."
    return f"{headline}\n\n{CONFIRM_QUESTION}"
