"""Configuration handling for gitsy"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import tomli
import tomli_w

from gitsy.exceptions import ConfigError, SetupCancelledError
from gitsy.logging_config import get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = ".gitsy.toml"


@dataclass
class GitsyConfig:
    """Per-repository configuration for gitsy."""

    # Directory holding all managed worktrees, absolute or relative to the repo root
    worktree_path: str

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_worktree_path()

    def _validate_worktree_path(self):
        """Validate worktree_path is a non-empty string."""
        if not isinstance(self.worktree_path, str):
            raise ValueError(
                f"worktree_path must be a string, got {type(self.worktree_path).__name__}"
            )
        if not self.worktree_path.strip():
            raise ValueError("worktree_path cannot be empty")
        self.worktree_path = self.worktree_path.strip()

    def resolve_workspace_root(self, repo_root: Union[str, Path]) -> Path:
        """Return the workspace root, joining relative paths onto the repository root."""
        path = Path(self.worktree_path)
        if path.is_absolute():
            return path
        return Path(repo_root) / path

    def to_dict(self) -> dict:
        """Convert to dictionary for TOML serialization."""
        return {"worktree_path": self.worktree_path}

    @classmethod
    def from_dict(cls, config_dict: dict) -> "GitsyConfig":
        """Create GitsyConfig from dictionary, ignoring unknown keys."""
        if "worktree_path" not in config_dict:
            raise ValueError("missing required field 'worktree_path'")
        return cls(worktree_path=config_dict["worktree_path"])


def get_config_path(repo_root: Union[str, Path]) -> Path:
    """Get the path to the config file of a repository."""
    return Path(repo_root) / CONFIG_FILENAME


def load_config(repo_root: Union[str, Path]) -> Optional[GitsyConfig]:
    """Load the repository config.

    Returns:
        The parsed config, or None if the file does not exist

    Raises:
        ConfigError: If the file exists but cannot be read, parsed or validated
    """
    config_path = get_config_path(repo_root)
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}")
        return None

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)
    except OSError as e:
        raise ConfigError(str(config_path), f"cannot read file: {e}") from e
    except tomli.TOMLDecodeError as e:
        raise ConfigError(str(config_path), f"cannot parse TOML: {e}") from e

    try:
        config = GitsyConfig.from_dict(data)
    except ValueError as e:
        raise ConfigError(str(config_path), str(e)) from e

    logger.info(f"Loaded config from {config_path}: worktree_path={config.worktree_path}")
    return config


def save_config(repo_root: Union[str, Path], config: GitsyConfig) -> Path:
    """Write the config to the repository root and return the file path."""
    config_path = get_config_path(repo_root)
    try:
        with open(config_path, "wb") as f:
            tomli_w.dump(config.to_dict(), f)
    except OSError as e:
        raise ConfigError(str(config_path), f"cannot write file: {e}") from e

    logger.info(f"Saved config to {config_path}")
    return config_path


def load_or_create_config(
    repo_root: Union[str, Path], prompt: Callable[[Path], Optional[str]]
) -> GitsyConfig:
    """Load the config, running the setup prompt once if the file is absent.

    Args:
        repo_root: Repository root holding the config file
        prompt: Called with the repository root when no config exists; returns the
            entered worktree path, or None if the user cancelled

    Raises:
        ConfigError: If the existing file is invalid
        SetupCancelledError: If the prompt was cancelled
    """
    config = load_config(repo_root)
    if config is not None:
        return config

    worktree_path = prompt(Path(repo_root))
    if worktree_path is None:
        raise SetupCancelledError()

    config = GitsyConfig(worktree_path=worktree_path)
    save_config(repo_root, config)
    return config
