"""
Album table bootstrap module.

This module resolves the album table name and (re)creates the table with
the demonstration dataset.
"""

import logging
from decimal import Decimal
from typing import Tuple

import psycopg
from psycopg import sql

from ..constants import ALBUM_TABLE, TEST_ALBUM_TABLE
from ..models import Album

logger = logging.getLogger(__name__)

SEED_ALBUMS: Tuple[Album, ...] = (
    Album(title="Blue Train", artist="John Coltrane", price=Decimal("56.99")),
    Album(title="Giant Steps", artist="John Coltrane", price=Decimal("63.99")),
    Album(title="Jeru", artist="Gerry Mulligan", price=Decimal("17.99")),
    Album(title="Sarah Vaughan", artist="Sarah Vaughan", price=Decimal("34.98")),
)


def get_table_name(test_mode: bool = False) -> str:
    """
    Get the table name based on environment/mode.

    Args:
        test_mode: If True, return test table name

    Returns:
        Table name string
    """
    return TEST_ALBUM_TABLE if test_mode else ALBUM_TABLE


def reset_album_table(
    connection: "psycopg.Connection",
    table_name: str = ALBUM_TABLE,
    albums: Tuple[Album, ...] = SEED_ALBUMS,
) -> None:
    """
    Drop and recreate the album table, then insert the given albums.

    Runs in one transaction; the seed rows get ids 1..len(albums).

    Args:
        connection: Open database connection
        table_name: Table to recreate
        albums: Rows to insert after creating the table
    """
    table = sql.Identifier(table_name)
    logger.warning(f"Resetting table {table_name} with {len(albums)} seed albums")

    with connection.transaction():
        with connection.cursor() as cursor:
            cursor.execute(sql.SQL("DROP TABLE IF EXISTS {}").format(table))
            cursor.execute(
                sql.SQL(
                    "CREATE TABLE {} ("
                    "id SERIAL PRIMARY KEY, "
                    "title VARCHAR(128) NOT NULL, "
                    "artist VARCHAR(255) NOT NULL, "
                    "price NUMERIC(5, 2) NOT NULL)"
                ).format(table)
            )
            cursor.executemany(
                sql.SQL(
                    "INSERT INTO {} (title, artist, price) VALUES (%s, %s, %s)"
                ).format(table),
                [(album.title, album.artist, album.price) for album in albums],
            )

    logger.info(f"Table {table_name} ready")
