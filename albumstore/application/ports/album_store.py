"""Port interface for the album key-value store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

ALBUM_KEY_PREFIX = "album:"
RANKING_KEY = "likes"


def album_key(album_id: str) -> str:
    return ALBUM_KEY_PREFIX + album_id


@dataclass(frozen=True)
class HashIncrement:
    """Add ``amount`` to an integer field of a hash."""

    key: str
    field: str
    amount: int = 1


@dataclass(frozen=True)
class RankingIncrement:
    """Add ``amount`` to a member's score in a sorted ranking."""

    key: str
    member: str
    amount: float = 1


MutationIntent = HashIncrement | RankingIncrement


class AlbumStore(ABC):
    """Store handle scoped to a single operation.

    Implementations raise ``StoreError`` for any communication failure.
    """

    @abstractmethod
    async def get_fields(self, key: str) -> dict[str, str]:
        """Return all fields of the hash at ``key``; empty if it does not exist."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        ...

    @abstractmethod
    async def commit(self, intents: Sequence[MutationIntent]) -> None:
        """Apply every intent as one all-or-nothing unit."""
        ...

    @abstractmethod
    async def ping(self) -> bool:
        ...
