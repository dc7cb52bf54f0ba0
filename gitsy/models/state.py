"""Interactive state models: screens, menu, line editor and status messages."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from gitsy.constants import (
    ERROR_PREFIX,
    KEY_BACKSPACE,
    KEY_DELETE,
    KEY_END,
    KEY_HOME,
    KEY_LEFT,
    KEY_RIGHT,
    MENU_ITEMS,
)
from gitsy.models.keys import KeyPress


class Screen(Enum):
    """The active screen of the application."""
    MAIN_MENU = "main-menu"
    CREATE_BRANCH = "create-branch"
    DELETE_BRANCH = "delete-branch"
    CONFIRM_DELETE = "confirm-delete"


class MessageKind(Enum):
    """Classification of a status message."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class StatusMessage:
    """Outcome text shown to the user, tagged as success or error."""

    kind: MessageKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind is MessageKind.ERROR

    @classmethod
    def success(cls, text: str) -> "StatusMessage":
        return cls(MessageKind.SUCCESS, text)

    @classmethod
    def error(cls, text: str) -> "StatusMessage":
        """Error message carrying the display marker."""
        return cls(MessageKind.ERROR, f"{ERROR_PREFIX}{text}")

    @classmethod
    def notice(cls, text: str) -> "StatusMessage":
        """Error-styled message shown verbatim, without the marker."""
        return cls(MessageKind.ERROR, text)


@dataclass
class MenuState:
    """Ordered menu labels with a cyclic selection."""

    items: List[str] = field(default_factory=lambda: list(MENU_ITEMS))
    selected: int = 0

    def __post_init__(self):
        if not self.items:
            raise ValueError("menu needs at least one item")
        if not 0 <= self.selected < len(self.items):
            raise ValueError(f"selected index {self.selected} out of range")

    def next(self) -> None:
        self.selected = (self.selected + 1) % len(self.items)

    def previous(self) -> None:
        self.selected = (self.selected - 1) % len(self.items)

    @property
    def current(self) -> str:
        return self.items[self.selected]


@dataclass
class InputBuffer:
    """Single-line text buffer with a cursor in ``[0, len(text)]``.

    Every operation keeps the cursor inside the buffer bounds; there is no
    undo history and no validation of the entered text.
    """

    text: str = ""
    cursor: int = 0

    def __post_init__(self):
        self.cursor = max(0, min(self.cursor, len(self.text)))

    def insert(self, char: str) -> None:
        self.text = self.text[:self.cursor] + char + self.text[self.cursor:]
        self.cursor += len(char)

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1

    def delete_forward(self) -> None:
        if self.cursor >= len(self.text):
            return
        self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.text)

    def clear(self) -> None:
        self.text = ""
        self.cursor = 0

    def is_empty(self) -> bool:
        return not self.text

    def apply_key(self, key: KeyPress) -> bool:
        """Apply an editing key to the buffer.

        Returns:
            True if the key was an editing key and has been applied
        """
        if key.key == KEY_BACKSPACE:
            self.backspace()
        elif key.key == KEY_DELETE:
            self.delete_forward()
        elif key.key == KEY_LEFT:
            self.move_left()
        elif key.key == KEY_RIGHT:
            self.move_right()
        elif key.key == KEY_HOME:
            self.move_home()
        elif key.key == KEY_END:
            self.move_end()
        elif key.is_printable:
            self.insert(key.character)
        else:
            return False
        return True


@dataclass
class PendingDeletion:
    """A branch chosen for deletion, awaiting confirmation."""

    selected_branch_index: int
    branch_out_of_sync: bool


@dataclass
class AppState:
    """All mutable state of one running application instance."""

    screen: Screen = Screen.MAIN_MENU
    menu: MenuState = field(default_factory=MenuState)
    input_buffer: InputBuffer = field(default_factory=InputBuffer)
    branches: List[str] = field(default_factory=list)
    selected_branch_index: int = 0
    status_message: Optional[StatusMessage] = None
    pending_deletion: Optional[PendingDeletion] = None

    @property
    def selected_branch(self) -> Optional[str]:
        if 0 <= self.selected_branch_index < len(self.branches):
            return self.branches[self.selected_branch_index]
        return None
