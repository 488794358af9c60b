#!/usr/bin/env python3
"""
Album Data Models

This module contains the album record shared by the repository, the
demonstration driver and the tests.
"""

from decimal import Decimal
from typing import Optional, NamedTuple, Sequence, Any


class Album(NamedTuple):
    """
    A single row of the album table.

    Attributes:
        title: Album title
        artist: Artist name, matched exactly by artist lookups
        price: Fixed-point price with two decimal digits
        id: Store-assigned surrogate key; None until the album is inserted
    """

    title: str
    artist: str
    price: Decimal
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Album":
        """
        Build an Album from a row selected as (id, title, artist, price).

        Args:
            row: Row tuple in storage column order

        Returns:
            Album with all four fields populated
        """
        album_id, title, artist, price = row
        return cls(
            title=title,
            artist=artist,
            price=price,
            id=album_id,
        )


def to_price(value: Any) -> Decimal:
    """
    Convert a price to the Decimal bound to the price column.

    Decimals pass through unchanged; the column does any rounding or
    rejects values it cannot hold.

    Raises:
        decimal.InvalidOperation: If the value is not a number
    """
    if isinstance(value, Decimal):
        return value
    # str() first so 43.33 stays 43.33 instead of its binary expansion
    return Decimal(str(value))
