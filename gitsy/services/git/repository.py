"""Repository discovery for gitsy."""

import os
from pathlib import Path
from typing import Optional, Union

import git

from gitsy.exceptions import NotARepositoryError
from gitsy.logging_config import get_logger

logger = get_logger(__name__)


def find_repo_root(start: Optional[Union[str, Path]] = None) -> Path:
    """Find the working directory of the repository containing ``start``.

    Walks upward from ``start`` (default: the current directory).

    Raises:
        NotARepositoryError: If no repository is found or it has no working tree
    """
    if start is None:
        try:
            start = os.getcwd()
        except OSError as e:
            raise NotARepositoryError(".", "Failed to get current directory") from e

    try:
        repo = git.Repo(start, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        raise NotARepositoryError(str(start)) from e

    try:
        working_dir = repo.working_tree_dir
    finally:
        repo.close()

    if working_dir is None:
        raise NotARepositoryError(str(start), "Repository doesn't have a working directory")

    logger.debug(f"Repository root: {working_dir}")
    return Path(working_dir)
