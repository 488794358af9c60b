"""
Core processing components for the album store.
"""

from .demo import (
    INSERT_ALBUM,
    UPDATE_ALBUM,
    format_album,
    format_albums,
    run_demo,
)

__all__ = [
    "INSERT_ALBUM",
    "UPDATE_ALBUM",
    "format_album",
    "format_albums",
    "run_demo",
]
