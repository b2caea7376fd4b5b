"""Domain errors raised by the album store layer."""


class AlbumStoreError(Exception):
    """Base class for album store failures."""


class AlbumNotFoundError(AlbumStoreError):
    """No record exists for the requested album id."""

    def __init__(self, album_id: str):
        super().__init__(f"No album found with id {album_id!r}")
        self.album_id = album_id


class StoreError(AlbumStoreError):
    """Transport, protocol or deserialization failure talking to the store."""
