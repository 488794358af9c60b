#!/usr/bin/env python3
"""
Tests for the album table bootstrap.
"""

import unittest
from decimal import Decimal
from unittest.mock import MagicMock

from psycopg import sql

from album_store.database import SEED_ALBUMS, reset_album_table


class TestResetAlbumTable(unittest.TestCase):
    def setUp(self):
        self.connection = MagicMock()
        self.cursor = self.connection.cursor.return_value.__enter__.return_value

    def test_drops_creates_and_seeds_in_one_transaction(self):
        reset_album_table(self.connection, "test_album")

        self.connection.transaction.assert_called_once()
        self.connection.transaction.return_value.__enter__.assert_called_once()

        drop, create = [c.args[0] for c in self.cursor.execute.call_args_list]
        self.assertIsInstance(drop, sql.Composed)
        self.assertIn("DROP TABLE IF EXISTS", repr(drop))
        self.assertIn("Identifier('test_album')", repr(drop))
        self.assertIn("NUMERIC(5, 2)", repr(create))
        self.assertIn("SERIAL PRIMARY KEY", repr(create))

        insert, params = self.cursor.executemany.call_args.args
        self.assertIn("INSERT INTO", repr(insert))
        self.assertEqual(len(params), len(SEED_ALBUMS))
        self.assertEqual(params[0], ("Blue Train", "John Coltrane", Decimal("56.99")))

    def test_seed_dataset(self):
        self.assertEqual(
            [(a.title, a.artist) for a in SEED_ALBUMS],
            [
                ("Blue Train", "John Coltrane"),
                ("Giant Steps", "John Coltrane"),
                ("Jeru", "Gerry Mulligan"),
                ("Sarah Vaughan", "Sarah Vaughan"),
            ],
        )
        for album in SEED_ALBUMS:
            self.assertIsNone(album.id)


if __name__ == "__main__":
    unittest.main()
