#!/usr/bin/env python3
"""
Album Store Package

A small PostgreSQL data-access layer for a table of music albums, with a
command-line demonstration that runs one lookup by artist, one lookup by id,
an insert, an update and a delete.
"""

__version__ = "1.0.0"
__author__ = "Album Store"
__description__ = (
    "Typed album repository over PostgreSQL with a CRUD demonstration CLI"
)
__license__ = "MIT"

# Import models for public API
from .models import (
    Album,
    DatabaseConfig,
    DemoResult,
)

# Import constants for public API
from .constants import (
    EXIT_SUCCESS,
    EXIT_CONFIG_ERROR,
    EXIT_DATABASE_ERROR,
    EXIT_OPERATION_FAILED,
    EXIT_INTERRUPTED,
    EXIT_UNEXPECTED_ERROR,
    DEFAULT_CONNECTION_TIMEOUT,
)

# Import database functions for public API
from .database import (
    AlbumRepository,
    AlbumRepositoryError,
    AlbumNotFoundError,
    StoreFailure,
    create_database_config,
    create_db_connection,
    database_session,
    validate_database_url,
)

# Import core functionality for public API
from .core import run_demo

# Import CLI functionality for public API
from .cli import (
    main,
    create_argument_parser,
)

# Import utilities for public API
from .utils import setup_logging

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "Album",
    "DatabaseConfig",
    "DemoResult",
    # Constants
    "EXIT_SUCCESS",
    "EXIT_CONFIG_ERROR",
    "EXIT_DATABASE_ERROR",
    "EXIT_OPERATION_FAILED",
    "EXIT_INTERRUPTED",
    "EXIT_UNEXPECTED_ERROR",
    "DEFAULT_CONNECTION_TIMEOUT",
    # Database
    "AlbumRepository",
    "AlbumRepositoryError",
    "AlbumNotFoundError",
    "StoreFailure",
    "create_database_config",
    "create_db_connection",
    "database_session",
    "validate_database_url",
    # Core functionality
    "run_demo",
    # CLI functions
    "main",
    "create_argument_parser",
    # Utilities
    "setup_logging",
]
