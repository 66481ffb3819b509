"""
In-Memory Store
===============

Process-lifetime key/value storage used by the in-memory repositories.
"""
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class InMemoryStore:
    """
    One dict per table, opened at application startup and closed at shutdown.

    Repositories hold a reference to the store, not to its tables, so a
    closed store rejects access instead of serving stale data.
    """

    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, Any]] = {}
        self._open = False

    def open(self) -> None:
        """Open the store. Opening an already open store is a no-op."""
        if self._open:
            return
        self._open = True
        logger.info("In-memory store opened")

    def close(self) -> None:
        """Close the store and discard all data."""
        self._tables.clear()
        self._open = False
        logger.info("In-memory store closed")

    def is_open(self) -> bool:
        return self._open

    def table(self, name: str) -> Dict[str, Any]:
        """
        Get a table by name, creating it on first use.

        Raises:
            RuntimeError: If the store is not open
        """
        if not self._open:
            raise RuntimeError("In-memory store is not open")
        return self._tables.setdefault(name, {})
