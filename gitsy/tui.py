"""Interactive TUI for gitsy using Textual."""

from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from .__version__ import __version__
from .constants import KEY_CTRL_C
from .core.setup_flow import SetupFlow
from .core.worktree_manager import WorktreeManager
from .logging_config import get_logger
from .models.keys import KeyPress
from .ui.render import project, project_setup
from .ui.views import (
    render_body,
    render_input,
    render_instructions,
    render_setup_info,
    render_text,
    render_title,
)
from .ui.widgets import KeyboardView, NonExpandingHeader

logger = get_logger(__name__)

BASE_CSS = """
Screen {
    background: $surface;
}

KeyboardView {
    padding: 1 2;
    height: 1fr;
}

#title, #instructions, #setup-instructions {
    height: auto;
}

#body {
    height: auto;
    min-height: 10;
}

#status {
    height: auto;
    margin-top: 1;
}

#setup-info {
    height: auto;
    margin-top: 1;
}
"""


class GitsyApp(App[int]):
    """Main interface: draws the render model of a WorktreeManager."""

    ENABLE_COMMAND_PALETTE = False
    TITLE = "Gitsy"
    SUB_TITLE = f"v{__version__}"
    CSS = BASE_CSS

    BINDINGS = [
        Binding("ctrl+c", "quit_now", "Quit", priority=True, show=False),
    ]

    def __init__(self, manager: WorktreeManager):
        super().__init__()
        self.manager = manager

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield NonExpandingHeader(show_clock=False, icon="")
        with KeyboardView(self.dispatch_key_press):
            yield Static(id="title")
            yield Static(id="body")
            yield Static(id="status")
            yield Static(id="instructions")

    def on_mount(self) -> None:
        self.query_one(KeyboardView).focus()
        self._refresh_view()

    def dispatch_key_press(self, key: KeyPress) -> None:
        """Feed a key to the state machine and redraw."""
        if self.manager.handle_key(key):
            self.exit(0)
            return
        self._refresh_view()

    def action_quit_now(self) -> None:
        """Ctrl+C: leave immediately from any screen."""
        logger.info("Interrupted with Ctrl+C")
        self.exit(0)

    def _refresh_view(self) -> None:
        model = project(self.manager.state)

        self.query_one("#title", Static).update(render_title(model.title))
        self.query_one("#body", Static).update(render_body(model.body))
        self.query_one("#instructions", Static).update(render_instructions(model.instructions))

        status = self.query_one("#status", Static)
        if model.status is not None:
            status.update(render_text(model.status))
            status.display = True
        else:
            status.update("")
            status.display = False


class SetupApp(App[Optional[str]]):
    """First-run interface asking for the worktree directory.

    Exits with the entered path, or None when cancelled.
    """

    ENABLE_COMMAND_PALETTE = False
    TITLE = "Gitsy Setup"
    SUB_TITLE = f"v{__version__}"
    CSS = BASE_CSS

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", priority=True, show=False),
    ]

    def __init__(self, repo_root: Path):
        super().__init__()
        self.flow = SetupFlow(repo_root)

    def compose(self) -> ComposeResult:
        yield NonExpandingHeader(show_clock=False, icon="")
        with KeyboardView(self.dispatch_key_press):
            yield Static(id="title")
            yield Static(id="setup-instructions")
            yield Static(id="body")
            yield Static(id="setup-info")

    def on_mount(self) -> None:
        self.query_one(KeyboardView).focus()
        self._refresh_view()

    def dispatch_key_press(self, key: KeyPress) -> None:
        if self.flow.handle_key(key):
            self.exit(self.flow.result)
            return
        self._refresh_view()

    def action_cancel(self) -> None:
        self.dispatch_key_press(KeyPress(KEY_CTRL_C))

    def _refresh_view(self) -> None:
        model = project_setup(self.flow)
        self.query_one("#title", Static).update(render_title(model.title))
        self.query_one("#setup-instructions", Static).update(model.instructions)
        self.query_one("#body", Static).update(render_input(model.input))
        self.query_one("#setup-info", Static).update(render_setup_info(model))


def run_setup(repo_root: Path) -> Optional[str]:
    """Run the setup interface and return the entered worktree path."""
    return SetupApp(repo_root).run()
