#!/usr/bin/env python3
"""
Application Constants

This module contains all configuration constants and exit codes used
throughout the album store application.
"""

# Exit codes for different failure modes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 3
EXIT_DATABASE_ERROR = 4  # Connection failed or the server rejected a statement
EXIT_OPERATION_FAILED = 5
EXIT_INTERRUPTED = 130  # Conventional exit code for Ctrl+C
EXIT_UNEXPECTED_ERROR = 10

# Database connection constants
DEFAULT_DB_HOST = "127.0.0.1"
DEFAULT_DB_PORT = 5432
DEFAULT_DB_NAME = "recordings"
DEFAULT_CONNECTION_TIMEOUT = 20  # seconds

# Table names
ALBUM_TABLE = "album"
TEST_ALBUM_TABLE = "test_album"

# Demonstration defaults
DEFAULT_DEMO_ARTIST = "John Coltrane"
DEFAULT_DEMO_ALBUM_ID = 4
DEFAULT_DEMO_UPDATE_ID = 2
DEFAULT_DEMO_DELETE_ID = 3
