"""Shared fakes for completion tests."""

from collections.abc import Callable, Sequence
from typing import Optional

import pytest

from wikicomplete.config import CompletionConfig, default_config
from wikicomplete.domain.types import Suggestion


class FakeExecutor:
    """QueryExecutor returning canned rows and recording every call."""

    def __init__(self, rows: Optional[list[str]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def execute(self, store: str, query: str) -> list[str]:
        self.calls.append((store, query))
        if self.error is not None:
            raise self.error
        return list(self.rows)


class FakeHost:
    """Single-line editor with a manual scheduler queue.

    Scheduled callbacks only run when :meth:`run_scheduled` is called, which
    stands in for the next turn of the editor's event loop.
    """

    def __init__(self, line: str = "", column: Optional[int] = None):
        self.line = line
        self.column = len(line) if column is None else column
        self.menu: Optional[list[Suggestion]] = None
        self.start_column: Optional[int] = None
        self.selected: Optional[int] = None
        self.scheduled: list[Callable[[], None]] = []
        self.events: list[tuple] = []

    def type(self, text: str) -> None:
        self.line = self.line[: self.column] + text + self.line[self.column :]
        self.column += len(text)

    def current_line(self) -> str:
        return self.line

    def cursor_column(self) -> int:
        return self.column

    def show_menu(self, start_column: int, suggestions: Sequence[Suggestion]) -> None:
        self.menu = list(suggestions)
        self.start_column = start_column
        self.selected = None
        self.events.append(("show_menu", start_column, [s.word for s in suggestions]))

    def hide_menu(self) -> None:
        self.menu = None
        self.selected = None
        self.events.append(("hide_menu",))

    def menu_visible(self) -> bool:
        return self.menu is not None

    def selected_index(self) -> Optional[int]:
        return self.selected

    def confirm_selection(self) -> None:
        assert self.menu is not None and self.selected is not None
        word = self.menu[self.selected].word
        self.line = self.line[: self.start_column] + word + self.line[self.column :]
        self.column = self.start_column + len(word)
        self.menu = None
        self.selected = None
        self.events.append(("confirm", word))

    def insert_text(self, text: str) -> None:
        self.type(text)
        self.events.append(("insert", text))

    def schedule(self, callback: Callable[[], None]) -> None:
        self.scheduled.append(callback)
        self.events.append(("schedule",))

    def run_scheduled(self) -> None:
        while self.scheduled:
            self.scheduled.pop(0)()


@pytest.fixture
def config() -> CompletionConfig:
    return default_config().with_overrides(db_path="/tmp/notes.db")


@pytest.fixture
def executor() -> FakeExecutor:
    return FakeExecutor(rows=["notes/project-a.md", "archive/2023/project-b.md", "Projector.md"])
