"""
Application layer: detection, suggestion retrieval and the completion session.
"""

from .detector import ContextDetector
from .provider import SuggestionProvider, suggestion_word
from .session import CompletionSession, PendingDelimiter
from .setup import build_executor, build_provider, setup

__all__ = [
    "CompletionSession",
    "ContextDetector",
    "PendingDelimiter",
    "SuggestionProvider",
    "build_executor",
    "build_provider",
    "setup",
    "suggestion_word",
]
