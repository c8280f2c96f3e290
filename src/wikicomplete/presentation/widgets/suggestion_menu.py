"""
SuggestionMenu - option list showing completion candidates.
"""

from collections.abc import Sequence
from typing import Optional

from textual.widgets import OptionList
from textual.widgets.option_list import Option

from wikicomplete.domain.types import Suggestion


class SuggestionMenu(OptionList):
    """Non-focusable list of suggestions; nothing is highlighted when shown."""

    can_focus = False

    DEFAULT_CSS = """
    SuggestionMenu {
        height: auto;
        max-height: 12;
        border: round $accent;
        display: none;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.suggestions: list[Suggestion] = []

    def show(self, suggestions: Sequence[Suggestion]) -> None:
        self.suggestions = list(suggestions)
        self.clear_options()
        self.add_options([Option(suggestion.label) for suggestion in self.suggestions])
        self.highlighted = None
        self.display = True

    def hide(self) -> None:
        self.display = False
        self.suggestions = []
        self.clear_options()

    @property
    def is_open(self) -> bool:
        return bool(self.display) and bool(self.suggestions)

    @property
    def selected(self) -> Optional[Suggestion]:
        index = self.highlighted
        if index is None or not 0 <= index < len(self.suggestions):
            return None
        return self.suggestions[index]
