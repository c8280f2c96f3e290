"""Domain protocols - interfaces for the external collaborators.

The completion core only talks to the data store through
:class:`QueryExecutor` and to the editor through :class:`HostEditor`.
Tests substitute fakes for both.
"""

from collections.abc import Callable, Sequence
from typing import Optional, Protocol

from wikicomplete.domain.types import Suggestion

__all__ = ["HostEditor", "QueryExecutor"]


class QueryExecutor(Protocol):
    """Runs a rendered query against a backing store."""

    def execute(self, store: str, query: str) -> list[str]:
        """Execute *query* against *store*.

        Args:
            store: Location of the store (e.g. a database file path)
            query: Fully rendered query text

        Returns:
            Result rows as text in store order. An unreachable store or a
            failed execution yields an empty list rather than an exception.
        """
        ...


class HostEditor(Protocol):
    """Buffer, cursor and menu operations the session needs from the editor."""

    def current_line(self) -> str:
        """Return the full text of the line holding the cursor."""
        ...

    def cursor_column(self) -> int:
        """Return the cursor column within :meth:`current_line`."""
        ...

    def show_menu(self, start_column: int, suggestions: Sequence[Suggestion]) -> None:
        """Display *suggestions*; accepting one replaces text from *start_column* to the cursor."""
        ...

    def hide_menu(self) -> None:
        ...

    def menu_visible(self) -> bool:
        ...

    def selected_index(self) -> Optional[int]:
        """Return the selected menu row, or None when nothing is selected."""
        ...

    def confirm_selection(self) -> None:
        """Native accept: insert the selected suggestion and close the menu."""
        ...

    def insert_text(self, text: str) -> None:
        """Insert *text* at the current cursor position."""
        ...

    def schedule(self, callback: Callable[[], None]) -> None:
        """Run *callback* on a later turn of the editor's event loop."""
        ...
