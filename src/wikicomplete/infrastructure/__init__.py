"""Infrastructure layer: concrete query executors."""

from wikicomplete.infrastructure.executors import SqliteCliExecutor, SqliteExecutor

__all__ = ["SqliteCliExecutor", "SqliteExecutor"]
