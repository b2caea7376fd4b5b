"""FindAlbumUseCase — read a single album record by id."""

from __future__ import annotations

import logging

from albumstore.application.ports.album_store import AlbumStore, album_key
from albumstore.domain.entities.album import Album
from albumstore.domain.errors import AlbumNotFoundError, StoreError

logger = logging.getLogger(__name__)


class FindAlbumUseCase:
    """Reads an album hash and maps it to an Album entity."""

    def __init__(self, store: AlbumStore):
        self._store = store

    async def execute(self, album_id: str) -> Album:
        """Fetch the album stored under ``album_id``.

        Raises:
            AlbumNotFoundError: no hash exists for the id.
            StoreError: the store failed or returned a malformed record.
        """
        fields = await self._store.get_fields(album_key(album_id))
        if not fields:
            logger.info("Album %s not found", album_id)
            raise AlbumNotFoundError(album_id)

        try:
            return Album.from_fields(fields)
        except (KeyError, ValueError) as e:
            logger.error("Album %s has a malformed record: %s", album_id, e)
            raise StoreError(f"Malformed record for album {album_id!r}: {e}") from e
