"""Key press model shared by the state machine and the TUI."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class KeyPress:
    """A single key event.

    ``key`` is the key name as Textual reports it ("up", "enter", "ctrl+c", "a"),
    ``character`` the text it would insert, if any.
    """

    key: str
    character: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return self.character is not None and len(self.character) == 1 and self.character.isprintable()

    @classmethod
    def char(cls, character: str) -> "KeyPress":
        """Build the key press for typing a single character."""
        return cls(key=character, character=character)
