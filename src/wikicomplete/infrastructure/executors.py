"""Query executors backed by SQLite.

Both executors honour the :class:`~wikicomplete.domain.protocols.QueryExecutor`
contract: a missing store or a failed query yields an empty list, never an
exception.
"""

import sqlite3
import subprocess
from pathlib import Path

from wikicomplete.logger import get_logger

logger = get_logger(__name__)


def _store_exists(store: str) -> bool:
    if Path(store).expanduser().is_file():
        return True
    logger.debug(f"Database not found at: {store}")
    return False


class SqliteCliExecutor:
    """Runs queries through the ``sqlite3`` command-line shell.

    The query is passed as a single argument, never through a shell, so
    prefix text cannot break out of the command line.

    Example:
        >>> executor = SqliteCliExecutor(timeout=1.0)
        >>> executor.execute("~/notes/index.db", "SELECT path FROM files LIMIT 2;")
        ['notes/a.md', 'notes/b.md']
    """

    def __init__(self, binary: str = "sqlite3", timeout: float = 2.0) -> None:
        self.binary = binary
        self.timeout = timeout

    def execute(self, store: str, query: str) -> list[str]:
        if not _store_exists(store):
            return []

        command = [self.binary, str(Path(store).expanduser()), query]
        logger.debug(f"Executing SQL command: {command}")
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except FileNotFoundError:
            logger.debug(f"sqlite3 binary not found: {self.binary}")
            return []
        except subprocess.TimeoutExpired:
            logger.debug(f"Query timed out after {self.timeout}s")
            return []
        except OSError as e:
            logger.debug(f"Failed to launch {self.binary}: {e}")
            return []

        if completed.returncode != 0:
            logger.debug(f"sqlite3 exited with {completed.returncode}: {completed.stderr.strip()}")
            return []

        rows = completed.stdout.splitlines()
        logger.debug(f"sqlite3 returned {len(rows)} row(s)")
        return rows


class SqliteExecutor:
    """Runs queries in-process with the standard :mod:`sqlite3` module.

    Only the first column of each row is kept, rendered as text the way the
    command-line shell prints it. The database is opened read-only.
    """

    def __init__(self, timeout: float = 2.0) -> None:
        self.timeout = timeout

    def execute(self, store: str, query: str) -> list[str]:
        if not _store_exists(store):
            return []

        uri = Path(store).expanduser().resolve().as_uri() + "?mode=ro"
        try:
            connection = sqlite3.connect(uri, uri=True, timeout=self.timeout)
        except sqlite3.Error as e:
            logger.debug(f"Cannot open database {store}: {e}")
            return []

        try:
            rows = connection.execute(query).fetchall()
        except sqlite3.Error as e:
            logger.debug(f"Query failed: {e}")
            return []
        finally:
            connection.close()

        values = ["" if row[0] is None else str(row[0]) for row in rows if row]
        logger.debug(f"sqlite returned {len(values)} row(s)")
        return values
