"""Custom exceptions for gitsy"""

from typing import Optional


class GitsyError(Exception):
    """Base exception for all gitsy errors."""


class ConfigError(GitsyError):
    """Exception raised when the config file cannot be read or is invalid."""

    def __init__(self, path: str, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Invalid config file '{path}': {message}")


class NotARepositoryError(GitsyError):
    """Exception raised when no usable git working tree can be found."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = f"Not a git repository (or any parent up to mount point): {path}"
        if message:
            error_msg = f"{message}: {path}"

        super().__init__(error_msg)


class SetupCancelledError(GitsyError):
    """Exception raised when the user cancels the first-run setup."""

    def __init__(self):
        super().__init__("Setup cancelled by user")


class GatewayError(GitsyError):
    """Base exception for recoverable worktree gateway failures."""


class CommandFailedError(GatewayError):
    """Exception raised when a git worktree command fails or cannot be spawned."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"git worktree {operation} failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ResolutionFailedError(GatewayError):
    """Exception raised when a branch or its upstream cannot be resolved."""

    def __init__(self, branch: str, message: Optional[str] = None):
        self.branch = branch
        self.message = message

        error_msg = f"Could not resolve branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
