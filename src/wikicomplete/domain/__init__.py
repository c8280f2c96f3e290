"""Domain layer: trigger definitions, transient completion types and protocols."""

from wikicomplete.domain.protocols import HostEditor, QueryExecutor
from wikicomplete.domain.triggers import TriggerDefinition, TriggerRegistry
from wikicomplete.domain.types import CompletionContext, SessionState, Suggestion, escape_prefix

__all__ = [
    "CompletionContext",
    "HostEditor",
    "QueryExecutor",
    "SessionState",
    "Suggestion",
    "TriggerDefinition",
    "TriggerRegistry",
    "escape_prefix",
]
