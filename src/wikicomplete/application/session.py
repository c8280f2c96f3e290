"""
Completion session: the state machine between detection, the menu and acceptance.

Acceptance runs in two phases. Phase 1 asks the host to accept the selected
suggestion through its native action. Phase 2, a :class:`PendingDelimiter`
handed to :meth:`HostEditor.schedule`, appends the stop delimiter on a later
turn of the host's event loop, after the phase 1 insertion has landed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from wikicomplete.application.detector import ContextDetector
from wikicomplete.application.provider import SuggestionProvider
from wikicomplete.domain.protocols import HostEditor
from wikicomplete.domain.types import CompletionContext, SessionState
from wikicomplete.logger import get_logger

logger = get_logger("completion.session")

NEWLINE = "\n"


@dataclass(slots=True)
class PendingDelimiter:
    """Phase 2 continuation: the delimiter owed to an accepted context."""

    context: CompletionContext
    inserted: bool = False

    @property
    def text(self) -> str:
        return self.context.trigger.stop_delimiter


class CompletionSession:
    """Coordinates detection, suggestion display and two-phase acceptance."""

    def __init__(self, detector: ContextDetector, provider: SuggestionProvider, host: HostEditor) -> None:
        self._detector = detector
        self._provider = provider
        self._host = host
        self._state = SessionState.IDLE
        self._context: Optional[CompletionContext] = None
        self._pending: Optional[PendingDelimiter] = None

    @property
    def state(self) -> SessionState:
        # The host may close its menu on its own (escape, focus loss)
        if self._state is SessionState.MENU_OPEN and not self._host.menu_visible():
            logger.debug("Host menu closed externally; session back to idle")
            self._state = SessionState.IDLE
            self._context = None
        return self._state

    @property
    def context(self) -> Optional[CompletionContext]:
        return self._context if self.state is SessionState.MENU_OPEN else None

    @property
    def pending(self) -> Optional[PendingDelimiter]:
        return self._pending

    def on_text_changed(self) -> SessionState:
        """Re-run detection and fetching from scratch for the current cursor."""
        if self._pending is not None:
            logger.debug("Delimiter insertion pending; ignoring text change")
            return self._state

        line = self._host.current_line()
        column = self._host.cursor_column()
        logger.debug(f"Text changed: line={line!r} column={column}")

        context = self._detector.detect_at(line, column)
        suggestions = self._provider.fetch(context) if context is not None else []
        if context is None or not suggestions:
            self._close()
            return self._state

        start_column = column - len(context.raw_prefix)
        logger.debug(f"Showing {len(suggestions)} suggestion(s) at column {start_column}")
        self._host.show_menu(start_column, suggestions)
        self._state = SessionState.MENU_OPEN
        self._context = context
        return self._state

    def on_accept_key(self) -> str:
        """Handle the accept key.

        Returns:
            The text the key should still produce: ``""`` when the key was
            consumed by an acceptance, a newline otherwise.
        """
        context = self.context
        if context is not None and self._host.selected_index() is not None:
            self._accept(context)
            return ""

        self._close()
        return NEWLINE

    def _accept(self, context: CompletionContext) -> None:
        pending = PendingDelimiter(context)
        self._pending = pending
        self._state = SessionState.IDLE
        self._context = None

        logger.debug(
            f"Accepting completion for {context.trigger.key!r}; stop delimiter {pending.text!r}"
        )
        self._host.confirm_selection()
        self._host.schedule(lambda: self._insert_delimiter(pending))

    def _insert_delimiter(self, pending: PendingDelimiter) -> None:
        if self._pending is not pending or pending.inserted:
            return
        self._pending = None
        pending.inserted = True
        logger.debug(f"Inserting stop delimiter {pending.text!r}")
        self._host.insert_text(pending.text)

    def _close(self) -> None:
        if self._state is SessionState.MENU_OPEN or self._host.menu_visible():
            self._host.hide_menu()
        self._state = SessionState.IDLE
        self._context = None
