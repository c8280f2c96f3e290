"""
TextualHost - HostEditor implementation over a NoteEditor and a SuggestionMenu.
"""

from collections.abc import Callable, Sequence
from typing import Optional

from wikicomplete.domain.types import Suggestion
from wikicomplete.logger import get_logger
from wikicomplete.presentation.widgets.editor import NoteEditor
from wikicomplete.presentation.widgets.suggestion_menu import SuggestionMenu

logger = get_logger("textual_host")


class TextualHost:
    """Adapts the Textual widgets to the session's editor interface.

    Accepting a suggestion replaces the text between the menu's start column
    and the cursor, so the trigger text itself is left in place.
    """

    def __init__(self, editor: NoteEditor, menu: SuggestionMenu) -> None:
        self.editor = editor
        self.menu = menu
        self._start_column = 0

    def current_line(self) -> str:
        row, _ = self.editor.cursor_location
        return self.editor.document.get_line(row)

    def cursor_column(self) -> int:
        return self.editor.cursor_location[1]

    def show_menu(self, start_column: int, suggestions: Sequence[Suggestion]) -> None:
        self._start_column = start_column
        self.menu.show(suggestions)

    def hide_menu(self) -> None:
        self.menu.hide()

    def menu_visible(self) -> bool:
        return self.menu.is_open

    def selected_index(self) -> Optional[int]:
        return self.menu.highlighted if self.menu.selected is not None else None

    def confirm_selection(self) -> None:
        suggestion = self.menu.selected
        if suggestion is None:
            return
        row, column = self.editor.cursor_location
        start = min(self._start_column, column)
        self.editor.replace(suggestion.word, (row, start), (row, column), maintain_selection_offset=False)
        self.menu.hide()
        logger.debug(f"Inserted {suggestion.word!r} at row {row}, column {start}")

    def insert_text(self, text: str) -> None:
        self.editor.insert(text, maintain_selection_offset=False)

    def schedule(self, callback: Callable[[], None]) -> None:
        self.editor.call_later(callback)
