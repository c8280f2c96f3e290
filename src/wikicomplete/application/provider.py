"""
Suggestion retrieval for a detected completion context.
"""

from __future__ import annotations

import re

from wikicomplete.domain.protocols import QueryExecutor
from wikicomplete.domain.types import CompletionContext, Suggestion
from wikicomplete.logger import get_logger

logger = get_logger("completion.provider")

_LAST_SEGMENT = re.compile(r"[^/\\]*$")


def suggestion_word(row: str) -> str:
    """Return the last path segment of *row*, or *row* itself when it has no separator."""
    match = _LAST_SEGMENT.search(row)
    return match.group(0) if match else row


class SuggestionProvider:
    """Turns a completion context into suggestions via a :class:`QueryExecutor`.

    The minimum length check runs on the escaped prefix, before the executor
    is contacted. Executor failures never propagate: the caller only ever
    sees an empty list.
    """

    def __init__(self, executor: QueryExecutor, store: str, min_chars: int = 3) -> None:
        self._executor = executor
        self._store = store
        self._min_chars = min_chars

    @property
    def min_chars(self) -> int:
        return self._min_chars

    def meets_threshold(self, context: CompletionContext) -> bool:
        return len(context.escaped_prefix) >= self._min_chars

    def fetch(self, context: CompletionContext) -> list[Suggestion]:
        if not self.meets_threshold(context):
            logger.debug(
                f"Prefix {context.escaped_prefix!r} below threshold ({self._min_chars}); skipping query"
            )
            return []

        trigger = context.trigger
        query = trigger.render_query(context.escaped_prefix)
        logger.debug(f"Querying store {self._store!r} for {trigger.key!r}: {query}")

        try:
            rows = self._executor.execute(self._store, query)
        except Exception as e:
            logger.debug(f"Query executor failed for {trigger.key!r}: {e}")
            return []

        suggestions = []
        for row in rows:
            word = suggestion_word(row.rstrip("\r\n"))
            if not word:
                logger.debug(f"Skipping row without a usable word: {row!r}")
                continue
            suggestions.append(Suggestion(word=word, kind=trigger.display_kind))

        logger.debug(f"Total suggestions found: {len(suggestions)}")
        return suggestions
