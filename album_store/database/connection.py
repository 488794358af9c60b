"""
Database connection management module.

This module handles opening, verifying and closing the single database
connection shared by all album operations.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg

from ..models import DatabaseConfig
from .config import redact_database_url

logger = logging.getLogger(__name__)


def create_db_connection(config: DatabaseConfig) -> "psycopg.Connection":
    """
    Open a database connection.

    The connection runs in autocommit mode, so each statement is its own
    transaction unless a caller opens a transaction block.

    Args:
        config: Database configuration settings

    Returns:
        Open database connection

    Raises:
        psycopg.OperationalError: If the server cannot be reached in time
    """
    logger.info(
        f"Connecting to {redact_database_url(config.url)} "
        f"(timeout={config.connection_timeout}s)"
    )
    try:
        connection = psycopg.connect(
            config.url,
            connect_timeout=config.connection_timeout,
            autocommit=True,
        )
    except psycopg.Error as e:
        logger.error(f"Failed to connect to database: {str(e)}")
        raise

    logger.debug("Database connection opened")
    return connection


def ping_database(connection: "psycopg.Connection") -> None:
    """
    Verify the connection with a round trip to the server.

    Args:
        connection: Database connection to check

    Raises:
        psycopg.Error: If the server does not answer
    """
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    logger.debug("Database ping succeeded")


def close_db_connection(connection: Optional["psycopg.Connection"]) -> None:
    """
    Close the database connection.

    Args:
        connection: Connection to close (ignored if None)
    """
    if connection is None:
        logger.debug("Connection is None, nothing to close")
        return

    try:
        logger.info("Closing database connection")
        connection.close()
        logger.info("Database connection closed successfully")

    except psycopg.Error as e:
        logger.error(f"Error closing database connection: {str(e)}")


@contextmanager
def database_session(config: DatabaseConfig) -> Iterator["psycopg.Connection"]:
    """
    Open and ping a connection, and close it when the block exits.

    Args:
        config: Database configuration settings

    Yields:
        Open, verified database connection
    """
    connection = create_db_connection(config)
    try:
        ping_database(connection)
        yield connection
    finally:
        close_db_connection(connection)
