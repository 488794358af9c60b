"""
Demonstration driver module.

This module runs the fixed sequence of album operations against a
repository and writes the results to the console.
"""

import logging
import sys
from decimal import Decimal
from typing import Iterable, Optional, TextIO

from ..constants import (
    DEFAULT_DEMO_ALBUM_ID,
    DEFAULT_DEMO_ARTIST,
    DEFAULT_DEMO_DELETE_ID,
    DEFAULT_DEMO_UPDATE_ID,
)
from ..database import AlbumRepository
from ..models import Album, DemoResult

logger = logging.getLogger(__name__)

INSERT_ALBUM = Album(title="Cinta Kasih New", artist="Firman New", price=Decimal("43.33"))
UPDATE_ALBUM = Album(title="New New Album", artist="New New Firman", price=Decimal("99.33"))


def format_album(album: Album) -> str:
    """Render an album as a single console line fragment."""
    prefix = f"#{album.id} " if album.id is not None else ""
    return f"{prefix}{album.title!r} by {album.artist} (${album.price})"


def format_albums(albums: Iterable[Album]) -> str:
    """Render a sequence of albums as a bracketed list."""
    return "[" + ", ".join(format_album(album) for album in albums) + "]"


def run_demo(
    repository: AlbumRepository,
    artist: str = DEFAULT_DEMO_ARTIST,
    album_id: int = DEFAULT_DEMO_ALBUM_ID,
    update_id: int = DEFAULT_DEMO_UPDATE_ID,
    delete_id: int = DEFAULT_DEMO_DELETE_ID,
    out: Optional[TextIO] = None,
) -> DemoResult:
    """
    Run find-by-artist, find-by-id, insert, update and delete in order.

    Each step waits for the previous one. Repository errors are not caught
    here; the first one stops the sequence.

    Args:
        repository: Repository to operate on
        artist: Artist name for the lookup
        album_id: Album id for the lookup
        update_id: Album id to overwrite with UPDATE_ALBUM
        delete_id: Album id to delete
        out: Stream for results (default: sys.stdout)

    Returns:
        DemoResult with the outcome of every step
    """
    out = out if out is not None else sys.stdout

    logger.debug(f"Looking up albums by artist {artist!r}")
    albums = repository.find_by_artist(artist)
    print(f"Albums found: {format_albums(albums)}", file=out)

    logger.debug(f"Looking up album {album_id}")
    album = repository.find_by_id(album_id)
    print(f"Album found: {format_album(album)}", file=out)

    logger.debug(f"Inserting album {INSERT_ALBUM.title!r}")
    inserted_id = repository.insert(INSERT_ALBUM)
    print(f"Inserted album id {inserted_id}, data: {format_album(INSERT_ALBUM)}", file=out)

    logger.debug(f"Updating album {update_id}")
    updated_rows = repository.update(update_id, UPDATE_ALBUM)
    if updated_rows == 0:
        logger.warning(f"Update matched no album with id {update_id}")
    print(f"Updated album, rows affected: {updated_rows}, data: {format_album(UPDATE_ALBUM)}", file=out)

    logger.debug(f"Deleting album {delete_id}")
    deleted_rows = repository.delete(delete_id)
    if deleted_rows == 0:
        logger.warning(f"Delete matched no album with id {delete_id}")
    print(f"Album deleted, rows affected: {deleted_rows}", file=out)

    return DemoResult(
        albums_by_artist=albums,
        album_by_id=album,
        inserted_id=inserted_id,
        updated_rows=updated_rows,
        deleted_rows=deleted_rows,
    )
