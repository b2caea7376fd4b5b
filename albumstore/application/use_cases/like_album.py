"""LikeAlbumUseCase — atomically bump an album's likes and its ranking score."""

from __future__ import annotations

import logging

from albumstore.application.ports.album_store import (
    RANKING_KEY,
    AlbumStore,
    HashIncrement,
    RankingIncrement,
    album_key,
)
from albumstore.domain.errors import AlbumNotFoundError

logger = logging.getLogger(__name__)


class LikeAlbumUseCase:
    """Increments the ``likes`` field and the ranking entry as one atomic batch."""

    def __init__(self, store: AlbumStore):
        self._store = store

    async def execute(self, album_id: str) -> None:
        """Record one like for ``album_id``.

        Pipeline:
        1. Existence check (no mutation if the album is absent)
        2. Build the batch: hash field increment + ranking increment
        3. Commit the batch atomically; replies are discarded

        Raises:
            AlbumNotFoundError: no record exists for the id.
            StoreError: any step failed; nothing was applied.
        """
        key = album_key(album_id)
        if not await self._store.exists(key):
            logger.info("Like rejected: album %s not found", album_id)
            raise AlbumNotFoundError(album_id)

        # Concurrent deletion between the check and the commit is not guarded.
        await self._store.commit([
            HashIncrement(key=key, field="likes", amount=1),
            RankingIncrement(key=RANKING_KEY, member=album_id, amount=1),
        ])
        logger.info("Album %s liked", album_id)
