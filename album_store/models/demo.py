#!/usr/bin/env python3
"""
Demonstration Models

This module contains the record returned by a demonstration run.
"""

from typing import List, NamedTuple

from .album import Album


class DemoResult(NamedTuple):
    """
    Outcome of the five demonstration operations.

    Attributes:
        albums_by_artist: Albums returned by the artist lookup
        album_by_id: Album returned by the id lookup
        inserted_id: Id assigned to the inserted album
        updated_rows: Rows affected by the update
        deleted_rows: Rows affected by the delete
    """

    albums_by_artist: List[Album]
    album_by_id: Album
    inserted_id: int
    updated_rows: int
    deleted_rows: int
