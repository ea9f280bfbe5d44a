# stockroom/common/persistence/mysql_connection.py
"""Shared MySQL connection handling for the repositories."""

import logging

import mysql.connector
from mysql.connector import Error, errorcode

from stockroom.common.config.settings import settings
from stockroom.common.exceptions.custom_exceptions import (
    ConflictError,
    DatabaseError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class MySQLRepositoryBase:
    """Lazily opens one MySQL connection per repository and reopens it when dropped."""

    def __init__(self) -> None:
        """Initializes the repository."""
        self._connection = None

    def _get_connection(self):
        """Establishes or returns an active MySQL database connection."""
        if not self._connection or not self._connection.is_connected():
            try:
                self._connection = mysql.connector.connect(
                    host=settings.DB_HOST,
                    port=settings.DB_PORT,
                    database=settings.DB_DATABASE,
                    user=settings.DB_USER,
                    password=settings.DB_PASSWORD,
                    autocommit=False,  # Better control over transactions
                    charset="utf8mb4",
                    use_unicode=True,
                )
            except Error as e:
                raise DatabaseError(f"Failed to connect to MySQL: {e}", original_exception=e)
        return self._connection

    @staticmethod
    def _translate_write_error(e: Error, conflict_message: str, missing_message: str) -> Exception:
        """Maps driver errors from INSERT/UPDATE to the application's error kinds."""
        if e.errno == errorcode.ER_DUP_ENTRY:
            return ConflictError(conflict_message, original_exception=e)
        if e.errno in (errorcode.ER_NO_REFERENCED_ROW, errorcode.ER_NO_REFERENCED_ROW_2):
            return NotFoundError(missing_message, original_exception=e)
        return DatabaseError(f"{e}", original_exception=e)

    def close(self) -> None:
        """Closes the database connection if open."""
        if self._connection and self._connection.is_connected():
            self._connection.close()
        self._connection = None

    def __del__(self) -> None:
        """Closes the database connection when the object is destroyed."""
        try:
            self.close()
        except Error as e:
            logger.debug(f"Ignoring error while closing MySQL connection: {e}")
