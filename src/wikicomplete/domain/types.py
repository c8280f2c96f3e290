"""Transient completion types shared by the detector, provider and session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wikicomplete.domain.triggers import TriggerDefinition

__all__ = ["CompletionContext", "SessionState", "Suggestion", "escape_prefix"]


def escape_prefix(raw_prefix: str) -> str:
    """Double single quotes so the prefix can sit inside a quoted SQL literal."""
    return raw_prefix.replace("'", "''")


@dataclass(frozen=True, slots=True)
class CompletionContext:
    """Result of one successful detection attempt."""

    trigger: TriggerDefinition
    raw_prefix: str
    escaped_prefix: str
    start_column: int

    @classmethod
    def from_match(cls, trigger: TriggerDefinition, raw_prefix: str, cursor_column: int) -> "CompletionContext":
        return cls(
            trigger=trigger,
            raw_prefix=raw_prefix,
            escaped_prefix=escape_prefix(raw_prefix),
            start_column=cursor_column - len(raw_prefix),
        )


@dataclass(frozen=True, slots=True)
class Suggestion:
    """A single candidate offered in the completion menu.

    The boolean flags mirror the menu behaviour the host should apply: keep
    duplicates, show even when the prefix is empty, compare without case and
    never preselect an entry.
    """

    word: str
    kind: str
    allow_duplicates: bool = True
    allow_empty: bool = True
    case_insensitive: bool = True
    no_preselect: bool = True

    @property
    def label(self) -> str:
        """Menu row text: the word followed by its kind."""
        return f"{self.word}  {self.kind}" if self.kind else self.word


class SessionState(Enum):
    """States of the completion session."""

    IDLE = "idle"
    MENU_OPEN = "menu_open"
