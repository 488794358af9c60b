"""
Album repository module.

This module maps the album operations onto parameterized SQL statements
against a single table. The repository borrows a connection supplied by the
caller and keeps no state between calls.
"""

from decimal import InvalidOperation
from typing import List, NamedTuple

import psycopg
from psycopg import sql

from ..constants import ALBUM_TABLE
from ..models import Album, to_price
from .errors import AlbumNotFoundError, StoreFailure


class AlbumStatements(NamedTuple):
    """Statements used by the repository, composed for one table."""

    select_by_artist: sql.Composed
    select_by_id: sql.Composed
    insert: sql.Composed
    update: sql.Composed
    delete: sql.Composed


def build_album_statements(table_name: str = ALBUM_TABLE) -> AlbumStatements:
    """
    Compose the repository statements for the given table.

    The table name is quoted as an identifier; every value is left as a
    positional placeholder to be bound at execution time.

    Args:
        table_name: Name of the album table

    Returns:
        AlbumStatements for the table
    """
    table = sql.Identifier(table_name)
    return AlbumStatements(
        select_by_artist=sql.SQL(
            "SELECT id, title, artist, price FROM {} WHERE artist = %s"
        ).format(table),
        select_by_id=sql.SQL(
            "SELECT id, title, artist, price FROM {} WHERE id = %s"
        ).format(table),
        insert=sql.SQL(
            "INSERT INTO {} (title, artist, price) VALUES (%s, %s, %s) RETURNING id"
        ).format(table),
        update=sql.SQL(
            "UPDATE {} SET title = %s, artist = %s, price = %s WHERE id = %s"
        ).format(table),
        delete=sql.SQL("DELETE FROM {} WHERE id = %s").format(table),
    )


class AlbumRepository:
    """
    Data access for the album table.

    Every method issues exactly one statement. Store errors are raised as
    StoreFailure; a by-id lookup that matches nothing raises
    AlbumNotFoundError. Zero rows affected by update or delete is returned,
    not raised.
    """

    def __init__(self, connection: "psycopg.Connection", table_name: str = ALBUM_TABLE):
        """
        Initialize the repository.

        Args:
            connection: Open database connection, owned by the caller
            table_name: Album table to operate on
        """
        self.connection = connection
        self.table_name = table_name
        self.statements = build_album_statements(table_name)

    def find_by_artist(self, name: str) -> List[Album]:
        """
        Return all albums whose artist equals name exactly.

        Args:
            name: Artist name, bound as a literal value

        Returns:
            Matching albums in store order; empty if there are none

        Raises:
            StoreFailure: If the query or reading its rows fails
        """
        try:
            with self.connection.cursor() as cursor:
                cursor.execute(self.statements.select_by_artist, (name,))
                return [Album.from_row(row) for row in cursor]
        except psycopg.Error as e:
            raise StoreFailure("find_by_artist", name, e) from e

    def find_by_id(self, album_id: int) -> Album:
        """
        Return the album with the given id.

        Raises:
            AlbumNotFoundError: If no row has this id
            StoreFailure: If the query fails
        """
        try:
            with self.connection.cursor() as cursor:
                cursor.execute(self.statements.select_by_id, (album_id,))
                row = cursor.fetchone()
        except psycopg.Error as e:
            raise StoreFailure("find_by_id", album_id, e) from e

        if row is None:
            raise AlbumNotFoundError(album_id)
        return Album.from_row(row)

    def insert(self, album: Album) -> int:
        """
        Insert an album and return the id the store assigned to it.

        album.id is ignored.

        Raises:
            StoreFailure: If the insert fails; no row is written in that case
        """
        try:
            params = (album.title, album.artist, to_price(album.price))
            with self.connection.transaction():
                with self.connection.cursor() as cursor:
                    cursor.execute(self.statements.insert, params)
                    row = cursor.fetchone()
        except psycopg.Error as e:
            raise StoreFailure("insert", album.title, e) from e
        except InvalidOperation as e:
            raise StoreFailure("insert", album.title, e) from e

        if row is None:
            raise StoreFailure(
                "insert", album.title, psycopg.DataError("insert returned no id")
            )
        return row[0]

    def update(self, album_id: int, album: Album) -> int:
        """
        Replace title, artist and price of the album with the given id.

        The row is addressed by album_id only; album.id is not used.

        Returns:
            Number of rows the store reports as affected (0 if no such id)

        Raises:
            StoreFailure: If the update fails
        """
        try:
            params = (album.title, album.artist, to_price(album.price), album_id)
            with self.connection.transaction():
                with self.connection.cursor() as cursor:
                    cursor.execute(self.statements.update, params)
                    return cursor.rowcount
        except psycopg.Error as e:
            raise StoreFailure("update", album_id, e) from e
        except InvalidOperation as e:
            raise StoreFailure("update", album_id, e) from e

    def delete(self, album_id: int) -> int:
        """
        Delete the album with the given id.

        Returns:
            Number of rows removed, 0 or 1

        Raises:
            StoreFailure: If the delete fails
        """
        try:
            with self.connection.transaction():
                with self.connection.cursor() as cursor:
                    cursor.execute(self.statements.delete, (album_id,))
                    return cursor.rowcount
        except psycopg.Error as e:
            raise StoreFailure("delete", album_id, e) from e
