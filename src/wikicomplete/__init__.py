"""Trigger-based inline completion of wiki links and tags."""

from loguru import logger as _loguru_logger

from wikicomplete.application import CompletionSession, ContextDetector, SuggestionProvider, setup
from wikicomplete.config import CompletionConfig, default_config, load_config
from wikicomplete.domain import (
    CompletionContext,
    HostEditor,
    QueryExecutor,
    SessionState,
    Suggestion,
    TriggerDefinition,
    TriggerRegistry,
)

__version__ = "0.1.0"

# Silent as a library until setup_logger or a debug config turns logging on
_loguru_logger.disable("wikicomplete")

__all__ = [
    "CompletionConfig",
    "CompletionContext",
    "CompletionSession",
    "ContextDetector",
    "HostEditor",
    "QueryExecutor",
    "SessionState",
    "Suggestion",
    "SuggestionProvider",
    "TriggerDefinition",
    "TriggerRegistry",
    "default_config",
    "load_config",
    "setup",
]
