"""
Context detection: which trigger, if any, is being typed at the cursor.
"""

from __future__ import annotations

from typing import Optional

from wikicomplete.domain.triggers import TriggerRegistry
from wikicomplete.domain.types import CompletionContext
from wikicomplete.logger import get_logger

logger = get_logger("completion.detector")


class ContextDetector:
    """Selects the first trigger whose pattern matches at the end of the text."""

    def __init__(self, registry: TriggerRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> TriggerRegistry:
        return self._registry

    def detect(self, text_before_cursor: str) -> Optional[CompletionContext]:
        if not text_before_cursor:
            return None

        for trigger in self._registry:
            # Anchored with \Z, so a trailing newline never counts as the end
            match = trigger.pattern.search(text_before_cursor)
            if match is None:
                continue
            raw_prefix = match.group(1) or ""
            context = CompletionContext.from_match(trigger, raw_prefix, len(text_before_cursor))
            logger.debug(f"Detected context {trigger.key!r} with prefix {context.escaped_prefix!r}")
            return context

        logger.debug("No trigger matched the text before the cursor")
        return None

    def detect_at(self, line: str, column: int) -> Optional[CompletionContext]:
        """Detect using the part of *line* left of *column*."""
        return self.detect(line[: max(column, 0)])
