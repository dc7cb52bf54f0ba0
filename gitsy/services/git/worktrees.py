"""Worktree gateway for gitsy."""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

import git

from gitsy.exceptions import CommandFailedError, ResolutionFailedError
from gitsy.logging_config import get_logger
from gitsy.models.worktree import WorktreeInfo

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"


def parse_worktree_list(output: str) -> List[WorktreeInfo]:
    """Parse ``git worktree list --porcelain`` output.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    A ``branch`` line belongs to the most recent ``worktree`` line. Entries
    without one (detached HEAD, bare) keep an empty branch name.
    """
    worktrees: List[WorktreeInfo] = []
    current: Optional[WorktreeInfo] = None

    for line in output.splitlines():
        line = line.strip()

        if not line:
            current = None
            continue

        if line.startswith("worktree "):
            current = WorktreeInfo(path=line.split(" ", 1)[1], branch_name="")
            worktrees.append(current)
        elif current is None:
            continue
        elif line.startswith("HEAD "):
            current.commit_sha = line.split(" ", 1)[1]
        elif line.startswith("branch "):
            branch_ref = line.split(" ", 1)[1]
            if branch_ref.startswith(BRANCH_REF_PREFIX):
                current.branch_name = branch_ref[len(BRANCH_REF_PREFIX):]

    return worktrees


def is_within(path: Union[str, Path], root: Union[str, Path]) -> bool:
    """Check whether ``path`` is ``root`` or one of its descendants.

    Compares path components of the real paths, so ``/ws-other`` is not
    inside ``/ws``.
    """
    real_path = Path(os.path.realpath(path))
    real_root = Path(os.path.realpath(root))
    return real_path == real_root or real_root in real_path.parents


class WorktreeGateway(ABC):
    """Operations on the worktrees of the managed workspace."""

    @abstractmethod
    def create(self, branch_name: str) -> None:
        """Add a worktree with a new branch under the workspace root.

        Raises:
            CommandFailedError: If git rejects the command or cannot be run
        """

    @abstractmethod
    def list_workspace_branches(self) -> List[str]:
        """Return the branches whose worktree lives under the workspace root.

        Raises:
            CommandFailedError: If the worktrees cannot be listed
        """

    @abstractmethod
    def remove(self, branch_name: str) -> None:
        """Remove the worktree of a branch from the workspace root.

        Raises:
            CommandFailedError: If git rejects the command or cannot be run
        """

    @abstractmethod
    def is_in_sync(self, branch_name: str) -> bool:
        """Check whether a branch points at the same commit as its upstream.

        A branch without an upstream counts as in sync.

        Raises:
            ResolutionFailedError: If the branch or its upstream cannot be resolved
        """


class GitWorktreeGateway(WorktreeGateway):
    """Worktree gateway backed by the git command line through GitPython."""

    def __init__(self, repo_root: Union[str, Path], workspace_root: Union[str, Path]):
        """Initialize the gateway.

        Args:
            repo_root: Working directory of the repository; every command runs here
            workspace_root: Resolved directory holding the managed worktrees
        """
        self.repo_root = Path(repo_root)
        self.workspace_root = Path(workspace_root)

    def _get_repo(self) -> git.Repo:
        """Open the repository; GitPython repos are cheap to open."""
        return git.Repo(self.repo_root)

    def worktree_path(self, branch_name: str) -> Path:
        """Directory of the worktree for a branch."""
        return self.workspace_root / branch_name

    def _run_worktree(self, operation: str, *args: str) -> str:
        """Run ``git worktree <operation> <args>`` and return its stdout."""
        logger.debug(f"Running git worktree {operation} {' '.join(args)}")
        try:
            repo = self._get_repo()
            status, stdout, stderr = repo.git.worktree(
                operation, *args, with_extended_output=True, with_exceptions=False
            )
        except (git.exc.GitCommandNotFound, git.exc.InvalidGitRepositoryError,
                git.exc.NoSuchPathError, OSError) as e:
            logger.error(f"Could not run git worktree {operation}: {e}")
            raise CommandFailedError(operation, str(e)) from e

        if status != 0:
            message = stderr.strip() or f"exit code {status}"
            logger.error(f"git worktree {operation} failed (exit {status}): {message}")
            raise CommandFailedError(operation, message)

        return stdout

    def create(self, branch_name: str) -> None:
        path = self.worktree_path(branch_name)
        self._run_worktree("add", "-b", branch_name, str(path))
        logger.info(f"Created worktree for branch {branch_name} at {path}")

    def list_worktrees(self) -> List[WorktreeInfo]:
        """Return every worktree of the repository, managed or not."""
        worktrees = parse_worktree_list(self._run_worktree("list", "--porcelain"))
        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    def list_workspace_branches(self) -> List[str]:
        branches = [
            wt.branch_name
            for wt in self.list_worktrees()
            if wt.has_branch and is_within(wt.path, self.workspace_root)
        ]
        logger.debug(f"Branches in workspace {self.workspace_root}: {branches}")
        return branches

    def remove(self, branch_name: str) -> None:
        path = self.worktree_path(branch_name)
        self._run_worktree("remove", str(path))
        logger.info(f"Removed worktree for branch {branch_name} at {path}")

    @staticmethod
    def _upstream_of(repo: git.Repo, head: git.Head) -> Optional[git.Reference]:
        """Return the configured upstream of ``head``, or None if there is none.

        ``tracking_branch()`` maps every upstream under ``refs/remotes/<remote>/``,
        which is wrong for a local upstream (remote ``.``); that one is the
        merge ref itself.
        """
        reader = head.config_reader()
        if not (reader.has_option("remote") and reader.has_option("merge")):
            return None
        if str(reader.get_value("remote")) == ".":
            merge_ref = str(reader.get_value("merge"))
            return git.Head(repo, git.Head.to_full_path(merge_ref))
        return head.tracking_branch()

    def is_in_sync(self, branch_name: str) -> bool:
        try:
            repo = self._get_repo()
            head = repo.heads[branch_name]
            local_sha = head.commit.hexsha
        except (IndexError, ValueError, git.exc.GitError) as e:
            raise ResolutionFailedError(branch_name, f"local branch not found ({e})") from e

        try:
            upstream = self._upstream_of(repo, head)
        except (ValueError, git.exc.GitError) as e:
            raise ResolutionFailedError(branch_name, f"cannot read upstream ({e})") from e

        if upstream is None:
            logger.debug(f"Branch {branch_name} has no upstream, treating as in sync")
            return True

        if not upstream.is_valid():
            # Upstream configured but its ref is gone, so nothing to compare against
            logger.debug(f"Upstream {upstream.path} of {branch_name} does not exist")
            return True

        try:
            upstream_sha = upstream.commit.hexsha
        except (ValueError, git.exc.GitError) as e:
            raise ResolutionFailedError(
                branch_name, f"cannot resolve upstream {upstream.name} ({e})"
            ) from e

        in_sync = local_sha == upstream_sha
        logger.debug(
            f"Branch {branch_name} at {local_sha[:7]}, upstream {upstream.name} at "
            f"{upstream_sha[:7]}: {'in sync' if in_sync else 'out of sync'}"
        )
        return in_sync
