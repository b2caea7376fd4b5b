"""Tests for the seed tool."""

from __future__ import annotations

import fakeredis
import pytest

from albumstore.domain.entities.album import Album
from albumstore.tools.seed_albums import SAMPLE_ALBUMS, seed


@pytest.mark.asyncio
async def test_seed_writes_records_and_ranking(redis_server, redis_sync):
    client = fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True)
    count = await seed(client, SAMPLE_ALBUMS)
    assert count == len(SAMPLE_ALBUMS)
    for album_id, album in SAMPLE_ALBUMS:
        assert Album.from_fields(redis_sync.hgetall(f"album:{album_id}")) == album
        assert redis_sync.zscore("likes", album_id) == album.likes


@pytest.mark.asyncio
async def test_seed_drop_removes_old_albums(redis_server, redis_sync):
    redis_sync.hset("album:old", mapping={"title": "Old", "artist": "Gone", "price": "1.0", "likes": "9"})
    redis_sync.zadd("likes", {"old": 9})
    redis_sync.set("unrelated", "keep")

    client = fakeredis.FakeAsyncRedis(server=redis_server, decode_responses=True)
    await seed(client, SAMPLE_ALBUMS[:1], drop=True)

    assert not redis_sync.exists("album:old")
    assert redis_sync.zscore("likes", "old") is None
    assert redis_sync.get("unrelated") == "keep"
    assert redis_sync.exists("album:1")
