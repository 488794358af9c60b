#!/usr/bin/env python3
"""
Database package for the album store.

This package provides connection management, configuration, the album
repository, its error types, and table bootstrap utilities.
"""

from .connection import (
    create_db_connection,
    ping_database,
    close_db_connection,
    database_session,
)

from .config import (
    validate_database_url,
    build_database_url,
    redact_database_url,
    create_database_config,
)

from .errors import (
    AlbumRepositoryError,
    AlbumNotFoundError,
    StoreFailure,
)

from .repository import (
    AlbumRepository,
    AlbumStatements,
    build_album_statements,
)

from .schema import (
    SEED_ALBUMS,
    get_table_name,
    reset_album_table,
)

from .utils import (
    classify_database_error,
)

__all__ = [
    # Connection management
    "create_db_connection",
    "ping_database",
    "close_db_connection",
    "database_session",
    # Configuration
    "validate_database_url",
    "build_database_url",
    "redact_database_url",
    "create_database_config",
    # Errors
    "AlbumRepositoryError",
    "AlbumNotFoundError",
    "StoreFailure",
    # Repository
    "AlbumRepository",
    "AlbumStatements",
    "build_album_statements",
    # Table bootstrap
    "SEED_ALBUMS",
    "get_table_name",
    "reset_album_table",
    # Utilities
    "classify_database_error",
]
