"""Transactions with SAVEPOINT-based nesting, one connection per thread."""

import logging
import threading
from contextlib import contextmanager
from typing import Callable

from .connection import get_connection

logger = logging.getLogger(__name__)


class TransactionError(Exception):
    """Raised when a transaction is used after it ended or from a nested level."""


class TransactionManager:

    def __init__(self, connection_factory: Callable):
        """
        Initialize the transaction manager.

        Args:
            connection_factory: A callable that returns a database connection
        """
        self._connection_factory = connection_factory
        self._local = threading.local()

    # get connection (built on first call)

    def _get_connection(self):
        """Get or create a connection for the current thread"""
        if not hasattr(self._local, "connection"):
            self._local.connection = self._connection_factory()
        return self._local.connection

    # transaction level

    def _get_transaction_level(self) -> int:
        return getattr(self._local, "transaction_level", 0)

    def _set_transaction_level(self, level: int):
        self._local.transaction_level = level

    # actual transaction itself

    @contextmanager
    def transaction(self):
        """
        Context manager for database transactions.

        The outermost level opens a transaction with BEGIN and commits or rolls
        it back. Nested levels use SAVEPOINTs inside it, so a failing inner
        block only undoes its own statements.

        Yields:
            Transaction: Transaction object for executing statements
        """
        connection = self._get_connection()
        level = self._get_transaction_level() + 1
        self._set_transaction_level(level)
        savepoint_name = f"savepoint_{level}" if level > 1 else None
        transaction_obj = Transaction(connection, self, level)

        try:
            if savepoint_name:
                logger.debug("SAVEPOINT %s", savepoint_name)
                connection.execute(f"SAVEPOINT {savepoint_name}")
            else:
                logger.debug("BEGIN")
                connection.execute("BEGIN")

            yield transaction_obj

            if savepoint_name:
                logger.debug("RELEASE SAVEPOINT %s", savepoint_name)
                connection.execute(f"RELEASE SAVEPOINT {savepoint_name}")
            else:
                logger.debug("COMMIT")
                connection.commit()

        except Exception:
            if savepoint_name:
                logger.debug("ROLLBACK TO SAVEPOINT %s", savepoint_name)
                connection.execute(f"ROLLBACK TO SAVEPOINT {savepoint_name}")
                connection.execute(f"RELEASE SAVEPOINT {savepoint_name}")
            else:
                logger.debug("ROLLBACK")
                connection.rollback()
            raise
        finally:
            transaction_obj.close()
            self._set_transaction_level(max(0, level - 1))


class Transaction:
    """Handle yielded by TransactionManager.transaction(); executes statements at its own level."""

    def __init__(self, connection, manager: TransactionManager, level: int):
        self._connection = connection
        self._manager = manager
        self._level = level
        self._active = True

    @property
    def level(self) -> int:
        return self._level

    def close(self):
        self._active = False

    def execute(self, sql: str, parameters=()):
        """
        Execute a statement within this transaction.

        Returns:
            The driver cursor

        Raises:
            TransactionError: If the transaction ended, or a nested transaction is open
        """
        if not self._active:
            raise TransactionError("Transaction is no longer active")
        current_level = self._manager._get_transaction_level()
        if current_level > self._level:
            raise TransactionError(
                f"Cannot use transaction level {self._level} from level {current_level}. "
                "Higher-level transactions cannot be accessed from nested transactions."
            )
        return self._connection.execute(sql, parameters)


_transaction_managers: dict[str, TransactionManager] = {}


def transaction(connection_name: str = "default"):
    """Open a (possibly nested) transaction on the named connection."""
    if connection_name not in _transaction_managers:
        _transaction_managers[connection_name] = TransactionManager(
            connection_factory=lambda: get_connection(name=connection_name)
        )
    return _transaction_managers[connection_name].transaction()


def reset_transaction_managers() -> None:
    """Forget the per-name managers (and their cached connections)."""
    _transaction_managers.clear()
