"""
CompletionApp - Textual editor with wiki link and tag completion.
"""

from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, TextArea

from wikicomplete.application.session import CompletionSession
from wikicomplete.application.setup import setup
from wikicomplete.config import CompletionConfig
from wikicomplete.domain.protocols import QueryExecutor
from wikicomplete.logger import get_logger
from wikicomplete.presentation.host import TextualHost
from wikicomplete.presentation.widgets import NoteEditor, SuggestionMenu

logger = get_logger("completion_app")


class CompletionApp(App):
    """
    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │          NoteEditor          │
    ├──────────────────────────────┤
    │  SuggestionMenu (when open)  │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "wikicomplete"

    CSS = """
    NoteEditor {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(
        self,
        config: CompletionConfig,
        path: Optional[Path] = None,
        executor: Optional[QueryExecutor] = None,
        text: str = "",
    ) -> None:
        super().__init__()
        self.config = config
        self.path = path
        self._executor = executor
        self._initial_text = text
        if path is not None and path.exists():
            self._initial_text = path.read_text(encoding="utf-8")
        self.session: Optional[CompletionSession] = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield NoteEditor(self._initial_text, id="editor")
            yield SuggestionMenu(id="suggestions")
        yield Footer()

    def on_mount(self) -> None:
        editor = self.query_one(NoteEditor)
        menu = self.query_one(SuggestionMenu)
        self.session = setup(self.config, TextualHost(editor, menu), self._executor)
        editor.session = self.session
        editor.menu = menu
        if self.path is not None:
            self.sub_title = str(self.path)
        editor.focus()
        logger.info(f"Editor ready (path={self.path}, triggers={self.config.triggers.keys()})")

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.session is not None:
            self.session.on_text_changed()

    def action_save(self) -> None:
        if self.path is None:
            self.notify("No file to save to", severity="warning")
            return
        self.path.write_text(self.query_one(NoteEditor).text, encoding="utf-8")
        self.notify(f"Saved {self.path}")
        logger.info(f"Saved {self.path}")
