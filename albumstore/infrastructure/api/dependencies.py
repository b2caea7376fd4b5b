"""FastAPI dependency injection — wires the store adapter into use cases."""

from __future__ import annotations

from collections.abc import AsyncIterator

import redis.asyncio as redis
from fastapi import Depends, Request

from albumstore.adapters.redis_store.album_store import RedisAlbumStore
from albumstore.application.ports.album_store import AlbumStore
from albumstore.application.use_cases.find_album import FindAlbumUseCase
from albumstore.application.use_cases.like_album import LikeAlbumUseCase


async def get_album_store(request: Request) -> AsyncIterator[AlbumStore]:
    """Yield a store handle bound to the shared pool for one request."""
    client = redis.Redis(connection_pool=request.app.state.redis_pool)
    try:
        yield RedisAlbumStore(client)
    finally:
        await client.aclose()


def get_find_album_uc(store: AlbumStore = Depends(get_album_store)) -> FindAlbumUseCase:
    return FindAlbumUseCase(store)


def get_like_album_uc(store: AlbumStore = Depends(get_album_store)) -> LikeAlbumUseCase:
    return LikeAlbumUseCase(store)
