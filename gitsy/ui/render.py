"""Render projection: what to draw for a given state, independent of layout."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from gitsy.constants import (
    APP_TITLE,
    HELP_CONFIRM_DELETE,
    HELP_CREATE_BRANCH,
    HELP_DELETE_BRANCH,
    HELP_MAIN_MENU,
    HELP_SETUP,
    HINT_SETUP,
    TITLE_CONFIRM_DELETE,
    TITLE_CREATE_BRANCH,
    TITLE_DELETE_BRANCH,
    TITLE_MAIN_MENU,
    TITLE_SETUP_INPUT,
    TITLE_STATUS,
)
from gitsy.core.setup_flow import SetupFlow
from gitsy.formatters import format_sync_warning
from gitsy.models.state import AppState, Screen, StatusMessage


class Tone(Enum):
    """Visual emphasis of a piece of text; mapped to styles by the views."""
    NORMAL = "normal"
    HIGHLIGHT = "highlight"
    MUTED = "muted"
    INPUT = "input"
    WARNING = "warning"
    DANGER = "danger"
    SUCCESS = "success"


@dataclass(frozen=True)
class ListView:
    title: str
    items: Tuple[str, ...]
    selected: int


@dataclass(frozen=True)
class InputView:
    title: str
    text: str
    cursor: int


@dataclass(frozen=True)
class TextView:
    title: str
    text: str
    tone: Tone = Tone.NORMAL


Body = Union[ListView, InputView, TextView]


@dataclass(frozen=True)
class RenderModel:
    """Everything the main interface shows for one state."""

    title: str
    body: Body
    instructions: str
    status: Optional[TextView] = None


@dataclass(frozen=True)
class SetupRenderModel:
    """Everything the setup interface shows."""

    title: str
    instructions: str
    input: InputView
    repo_root: str
    hint: str


def project_status(message: Optional[StatusMessage]) -> Optional[TextView]:
    if message is None:
        return None
    tone = Tone.DANGER if message.is_error else Tone.SUCCESS
    return TextView(TITLE_STATUS, message.text, tone)


def _project_body(state: AppState) -> Tuple[Body, str]:
    screen = state.screen

    if screen is Screen.MAIN_MENU:
        body = ListView(TITLE_MAIN_MENU, tuple(state.menu.items), state.menu.selected)
        return body, HELP_MAIN_MENU

    if screen is Screen.CREATE_BRANCH:
        buffer = state.input_buffer
        return InputView(TITLE_CREATE_BRANCH, buffer.text, buffer.cursor), HELP_CREATE_BRANCH

    if screen is Screen.DELETE_BRANCH:
        body = ListView(TITLE_DELETE_BRANCH, tuple(state.branches), state.selected_branch_index)
        return body, HELP_DELETE_BRANCH

    if screen is Screen.CONFIRM_DELETE:
        pending = state.pending_deletion
        if pending is None:
            raise ValueError("confirm screen active without a pending deletion")
        branch_name = state.branches[pending.selected_branch_index]
        tone = Tone.DANGER if pending.branch_out_of_sync else Tone.WARNING
        text = format_sync_warning(branch_name, pending.branch_out_of_sync)
        return TextView(TITLE_CONFIRM_DELETE, text, tone), HELP_CONFIRM_DELETE

    raise ValueError(f"Unknown screen: {screen}")


def project(state: AppState) -> RenderModel:
    """Describe what the main interface draws for ``state``."""
    body, instructions = _project_body(state)
    return RenderModel(
        title=APP_TITLE,
        body=body,
        instructions=instructions,
        status=project_status(state.status_message),
    )


def project_setup(flow: SetupFlow) -> SetupRenderModel:
    """Describe what the setup interface draws for ``flow``."""
    buffer = flow.input_buffer
    return SetupRenderModel(
        title=APP_TITLE,
        instructions=HELP_SETUP,
        input=InputView(TITLE_SETUP_INPUT, buffer.text, buffer.cursor),
        repo_root=str(flow.repo_root),
        hint=HINT_SETUP,
    )
