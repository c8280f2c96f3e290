"""
NoteEditor - text area that routes completion keys to the session.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from textual import events
from textual.widgets import TextArea

from wikicomplete.logger import get_logger

if TYPE_CHECKING:
    from wikicomplete.application.session import CompletionSession
    from wikicomplete.presentation.widgets.suggestion_menu import SuggestionMenu

logger = get_logger("note_editor")


class NoteEditor(TextArea):
    """
    Multi-line editor with trigger-based completion.

    While the suggestion menu is open, up/down move the menu highlight,
    escape closes it and enter is offered to the session first. Every other
    key keeps the default TextArea behaviour.
    """

    BORDER_TITLE = "Note"

    def __init__(self, text: str = "", **kwargs) -> None:
        super().__init__(text, **kwargs)
        self.session: Optional["CompletionSession"] = None
        self.menu: Optional["SuggestionMenu"] = None

    def _menu_open(self) -> bool:
        return self.menu is not None and self.menu.is_open

    def on_key(self, event: events.Key) -> None:
        # Runs before TextArea._on_key; prevent_default skips the insertion
        if event.key == "enter" and self.session is not None:
            if not self.session.on_accept_key():
                event.stop()
                event.prevent_default()
        elif event.key == "escape" and self._menu_open():
            self.menu.hide()
            event.stop()
            event.prevent_default()

    def action_cursor_down(self, select: bool = False) -> None:
        if self._menu_open() and not select:
            self.menu.action_cursor_down()
            return
        super().action_cursor_down(select)

    def action_cursor_up(self, select: bool = False) -> None:
        if self._menu_open() and not select:
            self.menu.action_cursor_up()
            return
        super().action_cursor_up(select)
