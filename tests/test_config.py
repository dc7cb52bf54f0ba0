"""Tests for configuration and first-run setup"""
from pathlib import Path
from unittest.mock import Mock

import pytest

from gitsy.config import (
    CONFIG_FILENAME,
    GitsyConfig,
    get_config_path,
    load_config,
    load_or_create_config,
    save_config,
)
from gitsy.core.setup_flow import SetupFlow
from gitsy.exceptions import ConfigError, SetupCancelledError
from gitsy.models.keys import KeyPress


class TestGitsyConfig:
    """Test config validation and path resolution."""

    def test_strips_whitespace(self):
        assert GitsyConfig(worktree_path="  worktrees ").worktree_path == "worktrees"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_path_rejected(self, value):
        with pytest.raises(ValueError, match="cannot be empty"):
            GitsyConfig(worktree_path=value)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError, match="must be a string"):
            GitsyConfig(worktree_path=42)

    def test_relative_path_joins_repo_root(self, temp_dir):
        config = GitsyConfig(worktree_path="worktrees")
        assert config.resolve_workspace_root(temp_dir) == temp_dir / "worktrees"

    def test_absolute_path_used_as_is(self, temp_dir):
        absolute = temp_dir / "elsewhere"
        config = GitsyConfig(worktree_path=str(absolute))
        assert config.resolve_workspace_root(Path("/some/repo")) == absolute

    def test_tilde_is_not_expanded(self, temp_dir):
        config = GitsyConfig(worktree_path="~/wt")
        assert config.resolve_workspace_root(temp_dir) == temp_dir / "~" / "wt"

    def test_from_dict_ignores_unknown_keys(self):
        config = GitsyConfig.from_dict({"worktree_path": "wt", "theme": "dark"})
        assert config.to_dict() == {"worktree_path": "wt"}

    def test_from_dict_requires_worktree_path(self):
        with pytest.raises(ValueError, match="worktree_path"):
            GitsyConfig.from_dict({})


class TestConfigFile:
    """Test reading and writing .gitsy.toml."""

    def test_missing_file_loads_none(self, temp_dir):
        assert load_config(temp_dir) is None

    def test_save_writes_toml(self, temp_dir):
        path = save_config(temp_dir, GitsyConfig(worktree_path="worktrees"))

        assert path == temp_dir / CONFIG_FILENAME
        assert path.read_text().strip() == 'worktree_path = "worktrees"'

    def test_save_then_load(self, temp_dir):
        save_config(temp_dir, GitsyConfig(worktree_path="../trees"))
        assert load_config(temp_dir).worktree_path == "../trees"

    def test_invalid_toml_is_config_error(self, temp_dir):
        get_config_path(temp_dir).write_text("worktree_path = \n")

        with pytest.raises(ConfigError, match="cannot parse TOML"):
            load_config(temp_dir)

    def test_missing_field_is_config_error(self, temp_dir):
        get_config_path(temp_dir).write_text('other = "value"\n')

        with pytest.raises(ConfigError, match="worktree_path"):
            load_config(temp_dir)

    def test_wrong_type_is_config_error(self, temp_dir):
        get_config_path(temp_dir).write_text("worktree_path = 3\n")

        with pytest.raises(ConfigError, match="must be a string"):
            load_config(temp_dir)


class TestLoadOrCreateConfig:
    """Test the first-run flow around the config file."""

    def test_setup_runs_once_and_persists(self, temp_dir):
        prompt = Mock(return_value="worktrees")

        config = load_or_create_config(temp_dir, prompt)

        prompt.assert_called_once_with(temp_dir)
        assert config.worktree_path == "worktrees"
        assert 'worktree_path = "worktrees"' in get_config_path(temp_dir).read_text()

        # Relaunch reads the file without prompting again
        second_prompt = Mock()
        relaunched = load_or_create_config(temp_dir, second_prompt)

        second_prompt.assert_not_called()
        assert relaunched.worktree_path == "worktrees"

    def test_cancelled_setup_raises_and_writes_nothing(self, temp_dir):
        with pytest.raises(SetupCancelledError):
            load_or_create_config(temp_dir, Mock(return_value=None))

        assert not get_config_path(temp_dir).exists()

    def test_existing_invalid_config_is_not_overwritten(self, temp_dir):
        get_config_path(temp_dir).write_text("not toml [")
        prompt = Mock()

        with pytest.raises(ConfigError):
            load_or_create_config(temp_dir, prompt)

        prompt.assert_not_called()


def type_into(flow: SetupFlow, text: str) -> None:
    for char in text:
        flow.handle_key(KeyPress.char(char))


class TestSetupFlow:
    """Test the setup input field."""

    def test_enter_confirms_typed_path(self, temp_dir):
        flow = SetupFlow(temp_dir)
        type_into(flow, "worktrees")

        assert flow.handle_key(KeyPress("enter")) is True
        assert flow.result == "worktrees"

    def test_enter_on_empty_input_is_ignored(self, temp_dir):
        flow = SetupFlow(temp_dir)

        assert flow.handle_key(KeyPress("enter")) is False
        assert flow.result is None
        assert not flow.done

    @pytest.mark.parametrize("key", ["escape", "ctrl+c"])
    def test_cancel_keys(self, temp_dir, key):
        flow = SetupFlow(temp_dir)
        type_into(flow, "worktrees")

        assert flow.handle_key(KeyPress(key)) is True
        assert flow.cancelled
        assert flow.result is None

    def test_editing_keys(self, temp_dir):
        flow = SetupFlow(temp_dir)
        type_into(flow, "worktreez")
        flow.handle_key(KeyPress("backspace"))
        type_into(flow, "s")
        flow.handle_key(KeyPress("home"))
        type_into(flow, "../")
        flow.handle_key(KeyPress("enter"))

        assert flow.result == "../worktrees"

    def test_keys_after_done_are_ignored(self, temp_dir):
        flow = SetupFlow(temp_dir)
        type_into(flow, "wt")
        flow.handle_key(KeyPress("enter"))

        type_into(flow, "xyz")

        assert flow.result == "wt"

    def test_setup_flow_as_prompt(self, temp_dir):
        """Scripted setup session feeding load_or_create_config."""
        def prompt(repo_root):
            flow = SetupFlow(repo_root)
            type_into(flow, "worktrees")
            flow.handle_key(KeyPress("enter"))
            return flow.result

        config = load_or_create_config(temp_dir, prompt)

        assert config.worktree_path == "worktrees"
        assert load_config(temp_dir).worktree_path == "worktrees"
