"""Screen state machine for gitsy"""

from typing import Optional

from gitsy.constants import (
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_UP,
    MENU_CREATE,
    MENU_DELETE,
    MENU_EXIT,
    MSG_NO_BRANCHES,
)
from gitsy.exceptions import GatewayError
from gitsy.formatters import (
    format_created_message,
    format_delete_failure,
    format_deleted_message,
)
from gitsy.logging_config import get_logger
from gitsy.models.keys import KeyPress
from gitsy.models.state import AppState, PendingDeletion, Screen, StatusMessage
from gitsy.services.git.worktrees import WorktreeGateway

logger = get_logger(__name__)


def _is_up(key: KeyPress) -> bool:
    return key.key == KEY_UP or key.character == "k"


def _is_down(key: KeyPress) -> bool:
    return key.key == KEY_DOWN or key.character == "j"


class WorktreeManager:
    """Owns the application state and applies key presses to it.

    Each key is dispatched to the handler of the active screen. Handlers may
    call the gateway; those calls block until git returns. Gateway failures
    are caught here and turned into error status messages, so a failed
    command never leaves the interface.
    """

    def __init__(self, gateway: WorktreeGateway, state: Optional[AppState] = None):
        self.gateway = gateway
        self.state = state or AppState()

    @property
    def screen(self) -> Screen:
        return self.state.screen

    def handle_key(self, key: KeyPress) -> bool:
        """Apply a key press to the active screen.

        Returns:
            True if the application should exit
        """
        screen = self.state.screen
        if screen is Screen.MAIN_MENU:
            should_exit = self._handle_main_menu_key(key)
        elif screen is Screen.CREATE_BRANCH:
            should_exit = self._handle_create_branch_key(key)
        elif screen is Screen.DELETE_BRANCH:
            should_exit = self._handle_delete_branch_key(key)
        elif screen is Screen.CONFIRM_DELETE:
            should_exit = self._handle_confirm_delete_key(key)
        else:
            raise ValueError(f"Unknown screen: {screen}")

        if self.state.screen is not screen:
            logger.debug(f"Screen {screen.value} -> {self.state.screen.value} on '{key.key}'")
        return should_exit

    def _set_screen(self, screen: Screen) -> None:
        self.state.screen = screen
        if screen is not Screen.CONFIRM_DELETE:
            self.state.pending_deletion = None

    # Main menu

    def _handle_main_menu_key(self, key: KeyPress) -> bool:
        state = self.state
        if _is_up(key):
            state.menu.previous()
        elif _is_down(key):
            state.menu.next()
        elif key.key == KEY_ENTER:
            selected = state.menu.selected
            if selected == MENU_CREATE:
                state.input_buffer.clear()
                state.status_message = None
                self._set_screen(Screen.CREATE_BRANCH)
            elif selected == MENU_DELETE:
                self._open_delete_list()
            elif selected == MENU_EXIT:
                logger.info("Exit selected from main menu")
                return True
        return False

    def _open_delete_list(self) -> None:
        """Reload the workspace branches and enter the delete list if any exist."""
        state = self.state
        try:
            branches = self.gateway.list_workspace_branches()
        except GatewayError as e:
            logger.error(f"Could not load branches: {e}")
            state.status_message = StatusMessage.error(str(e))
            return

        state.branches = branches
        if not branches:
            state.status_message = StatusMessage.notice(MSG_NO_BRANCHES)
            return

        state.selected_branch_index = 0
        state.status_message = None
        self._set_screen(Screen.DELETE_BRANCH)

    # Create branch

    def _handle_create_branch_key(self, key: KeyPress) -> bool:
        state = self.state
        if key.key == KEY_ESCAPE:
            state.status_message = None
            self._set_screen(Screen.MAIN_MENU)
        elif key.key == KEY_ENTER:
            if not state.input_buffer.is_empty():
                self._create_worktree(state.input_buffer.text)
        else:
            state.input_buffer.apply_key(key)
        return False

    def _create_worktree(self, branch_name: str) -> None:
        state = self.state
        try:
            self.gateway.create(branch_name)
        except GatewayError as e:
            # Keep the typed name so the user can fix it
            state.status_message = StatusMessage.error(str(e))
            return

        state.status_message = StatusMessage.success(format_created_message(branch_name))
        state.input_buffer.clear()

    # Delete branch

    def _handle_delete_branch_key(self, key: KeyPress) -> bool:
        state = self.state
        count = len(state.branches)
        if key.key == KEY_ESCAPE:
            state.status_message = None
            self._set_screen(Screen.MAIN_MENU)
        elif _is_up(key) and count:
            state.selected_branch_index = (state.selected_branch_index - 1) % count
        elif _is_down(key) and count:
            state.selected_branch_index = (state.selected_branch_index + 1) % count
        elif key.key == KEY_ENTER and count:
            self._check_branch_before_delete()
        return False

    def _check_branch_before_delete(self) -> None:
        state = self.state
        branch_name = state.branches[state.selected_branch_index]
        try:
            in_sync = self.gateway.is_in_sync(branch_name)
        except GatewayError as e:
            logger.error(f"Could not check sync status of {branch_name}: {e}")
            state.status_message = StatusMessage.error(str(e))
            return

        state.pending_deletion = PendingDeletion(
            selected_branch_index=state.selected_branch_index,
            branch_out_of_sync=not in_sync,
        )
        self._set_screen(Screen.CONFIRM_DELETE)

    # Confirm delete

    def _handle_confirm_delete_key(self, key: KeyPress) -> bool:
        if key.key == KEY_ESCAPE or key.character in ("n", "N"):
            self._set_screen(Screen.DELETE_BRANCH)
        elif key.character in ("y", "Y"):
            self._delete_pending()
        return False

    def _delete_pending(self) -> None:
        state = self.state
        pending = state.pending_deletion
        index = pending.selected_branch_index if pending else state.selected_branch_index
        branch_name = state.branches[index]

        try:
            self.gateway.remove(branch_name)
        except GatewayError as e:
            state.status_message = StatusMessage.error(format_delete_failure(branch_name, e))
        else:
            state.status_message = StatusMessage.success(format_deleted_message(branch_name))

        # The branch list is stale now; the menu reloads it on the next visit
        self._set_screen(Screen.MAIN_MENU)
