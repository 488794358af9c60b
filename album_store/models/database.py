#!/usr/bin/env python3
"""
Database Models

This module contains data structures related to database configuration.
"""

from typing import NamedTuple


class DatabaseConfig(NamedTuple):
    """
    Database configuration settings.

    Attributes:
        url: Database connection URL
        connection_timeout: Timeout for establishing the connection (seconds)
    """

    url: str
    connection_timeout: int = 20  # seconds
