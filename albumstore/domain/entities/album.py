"""Album entity — a record stored as a field mapping."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Album:
    title: str
    artist: str
    price: float
    likes: int = 0

    @classmethod
    def from_fields(cls, fields: Mapping[str, str]) -> Album:
        """Build an Album from the raw string fields of a stored hash.

        Raises:
            KeyError: a required field is absent.
            ValueError: price or likes cannot be parsed, price is not finite,
                or likes is negative.
        """
        likes = int(fields["likes"])
        if likes < 0:
            raise ValueError(f"likes must be >= 0, got {likes}")
        price = float(fields["price"])
        if not math.isfinite(price):
            raise ValueError(f"price must be finite, got {price}")
        return cls(
            title=fields["title"],
            artist=fields["artist"],
            price=price,
            likes=likes,
        )

    def to_fields(self) -> dict[str, str]:
        return {
            "title": self.title,
            "artist": self.artist,
            "price": repr(self.price),
            "likes": str(self.likes),
        }

    def describe(self, currency: str) -> str:
        return f"{self.title} by {self.artist}: {currency}{self.price:.2f} [{self.likes} likes]"
