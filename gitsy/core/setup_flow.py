"""First-run setup flow for gitsy."""

from pathlib import Path
from typing import Optional

from gitsy.constants import KEY_CTRL_C, KEY_ENTER, KEY_ESCAPE
from gitsy.logging_config import get_logger
from gitsy.models.keys import KeyPress
from gitsy.models.state import InputBuffer

logger = get_logger(__name__)


class SetupFlow:
    """Single required text field asking where worktrees are stored."""

    def __init__(self, repo_root: Path):
        self.repo_root = repo_root
        self.input_buffer = InputBuffer()
        self.cancelled = False
        self.finished = False

    @property
    def done(self) -> bool:
        return self.cancelled or self.finished

    @property
    def result(self) -> Optional[str]:
        """The entered path once confirmed, None otherwise."""
        if self.finished and not self.cancelled:
            return self.input_buffer.text
        return None

    def handle_key(self, key: KeyPress) -> bool:
        """Apply a key press; returns True once the flow is done."""
        if self.done:
            return True

        if key.key in (KEY_ESCAPE, KEY_CTRL_C):
            logger.info("Setup cancelled by user")
            self.cancelled = True
        elif key.key == KEY_ENTER:
            # Enter on an empty field is ignored
            if not self.input_buffer.is_empty():
                logger.info(f"Setup finished with worktree path '{self.input_buffer.text}'")
                self.finished = True
        else:
            self.input_buffer.apply_key(key)

        return self.done
