"""Pytest fixtures for gitsy tests"""
import tempfile
from pathlib import Path
from typing import List, Optional

import git
import pytest

from gitsy.exceptions import CommandFailedError, GatewayError
from gitsy.services.git.worktrees import WorktreeGateway


class FakeGateway(WorktreeGateway):
    """Scripted gateway: records calls and returns configured results."""

    def __init__(self, branches: Optional[List[str]] = None, in_sync: bool = True):
        self.branches = list(branches or [])
        self.in_sync = in_sync
        self.create_error: Optional[GatewayError] = None
        self.list_error: Optional[GatewayError] = None
        self.remove_error: Optional[GatewayError] = None
        self.sync_error: Optional[GatewayError] = None
        self.calls = []

    def create(self, branch_name: str) -> None:
        self.calls.append(("create", branch_name))
        if self.create_error:
            raise self.create_error
        self.branches.append(branch_name)

    def list_workspace_branches(self) -> List[str]:
        self.calls.append(("list",))
        if self.list_error:
            raise self.list_error
        return list(self.branches)

    def remove(self, branch_name: str) -> None:
        self.calls.append(("remove", branch_name))
        if self.remove_error:
            raise self.remove_error
        self.branches.remove(branch_name)

    def is_in_sync(self, branch_name: str) -> bool:
        self.calls.append(("is_in_sync", branch_name))
        if self.sync_error:
            raise self.sync_error
        return self.in_sync


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def fake_gateway():
    """Create an empty scripted gateway."""
    return FakeGateway()


@pytest.fixture
def command_failed():
    """Factory for gateway command failures."""
    def _make(operation: str = "add", message: str = "fatal: something went wrong"):
        return CommandFailedError(operation, message)
    return _make


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository for testing."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    test_file = repo_path / "README.md"
    test_file.write_text("# Test Repository\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def repo_root(git_repo):
    """Working directory of the test repository."""
    return Path(git_repo.working_dir)


@pytest.fixture
def workspace_root(repo_root):
    """Managed worktree directory inside the test repository."""
    return repo_root / "worktrees"
