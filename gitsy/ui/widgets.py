"""Custom widgets for the gitsy TUI."""

from typing import Callable

from textual import events
from textual.containers import Vertical
from textual.events import Click
from textual.widgets import Header

from gitsy.models.keys import KeyPress


class NonExpandingHeader(Header):
    """Header widget that doesn't expand/contract on click."""

    def on_click(self, event: Click) -> None:
        """Override to disable click-to-expand behavior."""
        event.stop()


class KeyboardView(Vertical, can_focus=True):
    """Focusable container that hands every key press to a callback.

    Keys are stopped here, so no widget or app binding sees them apart from
    priority bindings.
    """

    def __init__(self, on_key_press: Callable[[KeyPress], None], **kwargs):
        super().__init__(**kwargs)
        self._on_key_press = on_key_press

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._on_key_press(KeyPress(key=event.key, character=event.character))
