"""Shared constants for gitsy."""

APP_TITLE = "Gitsy - Git Worktree Manager"

# Main menu entries; the index is what the state machine dispatches on
MENU_CREATE = 0
MENU_DELETE = 1
MENU_EXIT = 2
MENU_ITEMS = ["Create new branch", "Delete a branch", "Exit"]

# Marker prepended to error status text
ERROR_PREFIX = "Error: "

MSG_NO_BRANCHES = "No branches with worktrees found"

# Panel titles
TITLE_MAIN_MENU = "Main Menu"
TITLE_CREATE_BRANCH = "Enter new branch name"
TITLE_DELETE_BRANCH = "Select branch to delete"
TITLE_CONFIRM_DELETE = "Confirm Delete"
TITLE_STATUS = "Status"
TITLE_SETUP_INPUT = "Worktree Path"

# Instruction lines
HELP_MAIN_MENU = "Use ↑/↓ or j/k to navigate, Enter to select, Esc to go back"
HELP_CREATE_BRANCH = "Type branch name and press Enter to create, Esc to cancel"
HELP_DELETE_BRANCH = "Use ↑/↓ or j/k to navigate, Enter to delete, Esc to cancel"
HELP_CONFIRM_DELETE = "Press Y to confirm, N or Esc to cancel"
HELP_SETUP = (
    "Enter the path where gitsy worktrees will be stored "
    "(Press Enter to confirm, Ctrl+C to cancel):"
)
HINT_SETUP = "The path can be absolute or relative to the repository root."

CONFIRM_QUESTION = "Are you sure you want to delete this worktree? (y/N)"

# Key names as delivered by Textual
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_HOME = "home"
KEY_END = "end"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_DELETE = "delete"
KEY_CTRL_C = "ctrl+c"

# Rich styles for the render tones
TONE_STYLES = {
    "normal": "white",
    "highlight": "bold yellow",
    "muted": "bright_black",
    "input": "yellow",
    "warning": "yellow",
    "danger": "red",
    "success": "green",
    "title": "bold cyan",
    "label": "green",
}
