"""Wiring: build a completion session from a configuration value."""

from __future__ import annotations

from typing import Optional

from loguru import logger as loguru_logger

from wikicomplete.application.detector import ContextDetector
from wikicomplete.application.provider import SuggestionProvider
from wikicomplete.application.session import CompletionSession
from wikicomplete.config import CompletionConfig
from wikicomplete.domain.protocols import HostEditor, QueryExecutor
from wikicomplete.infrastructure.executors import SqliteCliExecutor, SqliteExecutor
from wikicomplete.logger import get_logger

logger = get_logger("setup")


def build_executor(config: CompletionConfig) -> QueryExecutor:
    """Create the executor selected by ``config.executor``."""
    if config.executor == "sqlite":
        return SqliteExecutor(timeout=config.timeout)
    return SqliteCliExecutor(binary=config.sqlite_binary, timeout=config.timeout)


def build_provider(config: CompletionConfig, executor: Optional[QueryExecutor] = None) -> SuggestionProvider:
    return SuggestionProvider(
        executor=executor if executor is not None else build_executor(config),
        store=config.db_path,
        min_chars=config.min_chars,
    )


def setup(
    config: CompletionConfig,
    host: HostEditor,
    executor: Optional[QueryExecutor] = None,
) -> CompletionSession:
    """Create a :class:`CompletionSession` bound to *host*.

    Args:
        config: Validated, frozen configuration shared by all components
        host: Editor adapter receiving menu and insertion requests
        executor: Optional executor override (tests pass a fake)

    Returns:
        A session in the idle state
    """
    if config.debug:
        loguru_logger.enable("wikicomplete")

    detector = ContextDetector(config.triggers)
    provider = build_provider(config, executor)
    logger.debug(
        f"Setting up completion: triggers={config.triggers.keys()} "
        f"min_chars={config.min_chars} store={config.db_path!r}"
    )
    return CompletionSession(detector, provider, host)
