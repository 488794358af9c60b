"""
Utilities module for the album store.
"""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]
