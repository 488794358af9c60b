"""
Database configuration management module.

This module handles database configuration creation, URL validation
and URL construction from individual connection settings.
"""

import logging
from typing import Optional
from urllib.parse import quote, urlparse

from ..models import DatabaseConfig
from ..constants import (
    DEFAULT_CONNECTION_TIMEOUT,
    DEFAULT_DB_HOST,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PORT,
)

logger = logging.getLogger(__name__)


def validate_database_url(url: str) -> bool:
    """
    Validate that a database URL has the correct format.

    Args:
        url: Database URL to validate

    Returns:
        True if URL format is valid, False otherwise
    """
    if not url:
        return False

    try:
        parsed = urlparse(url)

        # Check for required components
        if not parsed.scheme:
            logger.error("Database URL missing scheme (e.g., postgresql://)")
            return False

        if parsed.scheme not in ["postgresql", "postgres"]:
            logger.error(
                f"Database URL scheme '{parsed.scheme}' not supported. Use 'postgresql://' or 'postgres://'"
            )
            return False

        if not parsed.hostname:
            logger.error("Database URL missing hostname")
            return False

        if not parsed.username:
            logger.error("Database URL missing username")
            return False

        if not parsed.path or parsed.path == "/":
            logger.error("Database URL missing database name")
            return False

        # Accessing .port validates it is numeric and in range
        parsed.port

        return True

    except ValueError as e:
        logger.error(f"Invalid database URL format: {str(e)}")
        return False


def build_database_url(
    user: str,
    password: Optional[str] = None,
    host: str = DEFAULT_DB_HOST,
    port: int = DEFAULT_DB_PORT,
    dbname: str = DEFAULT_DB_NAME,
) -> str:
    """
    Build a PostgreSQL URL from individual connection settings.

    Credentials are percent-encoded so any character may appear in them.

    Args:
        user: Database user name
        password: Database password (omitted from the URL if empty)
        host: Server hostname or address
        port: Server port
        dbname: Database name

    Returns:
        postgresql:// connection URL
    """
    credentials = quote(user, safe="")
    if password:
        credentials += ":" + quote(password, safe="")
    return f"postgresql://{credentials}@{host}:{port}/{quote(dbname, safe='')}"


def redact_database_url(url: str) -> str:
    """Return url with its password replaced by '***', for logging."""
    try:
        parsed = urlparse(url)
        if parsed.password is None:
            return url
        netloc = parsed.netloc.replace(f":{parsed.password}@", ":***@", 1)
        return parsed._replace(netloc=netloc).geturl()
    except ValueError:
        return "***"


def create_database_config(
    url: str,
    connection_timeout: Optional[int] = None,
) -> Optional[DatabaseConfig]:
    """
    Create a database configuration with validation.

    Args:
        url: Database connection URL
        connection_timeout: Connection timeout in seconds (default: DEFAULT_CONNECTION_TIMEOUT)

    Returns:
        DatabaseConfig object or None if validation fails
    """
    if not validate_database_url(url):
        return None

    final_connection_timeout = (
        connection_timeout
        if connection_timeout is not None
        else DEFAULT_CONNECTION_TIMEOUT
    )

    if final_connection_timeout < 1:
        logger.error(
            f"Connection timeout must be at least 1 second, got {final_connection_timeout}"
        )
        return None

    return DatabaseConfig(
        url=url,
        connection_timeout=final_connection_timeout,
    )
