#!/usr/bin/env python3
"""
Data Models Module

This module contains all data structures and type definitions used
throughout the album store application.
"""

from .album import Album, to_price
from .database import DatabaseConfig
from .demo import DemoResult

__all__ = [
    "Album",
    "to_price",
    "DatabaseConfig",
    "DemoResult",
]
