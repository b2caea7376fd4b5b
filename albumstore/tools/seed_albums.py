"""Seed Redis with album records.

Usage:
    python -m albumstore.tools.seed_albums
    python -m albumstore.tools.seed_albums --drop  # remove existing albums first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import redis.asyncio as redis
from redis.exceptions import RedisError

from albumstore.adapters.redis_store.connection import create_pool
from albumstore.application.ports.album_store import ALBUM_KEY_PREFIX, RANKING_KEY, album_key
from albumstore.domain.entities.album import Album

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

SAMPLE_ALBUMS: list[tuple[str, Album]] = [
    ("1", Album(title="Electric Ladyland", artist="Jimi Hendrix", price=4.95, likes=8)),
    ("2", Album(title="Back in Black", artist="AC/DC", price=5.95, likes=3)),
    ("3", Album(title="Rumours", artist="Fleetwood Mac", price=7.95, likes=12)),
    ("4", Album(title="Nevermind", artist="Nirvana", price=5.95, likes=8)),
]


async def _drop_data(client: redis.Redis) -> int:
    """Delete every album hash and the ranking."""
    keys = [key async for key in client.scan_iter(match=ALBUM_KEY_PREFIX + "*")]
    keys.append(RANKING_KEY)
    deleted = await client.delete(*keys)
    logger.info("Dropped %d key(s)", deleted)
    return deleted


async def seed(
    client: redis.Redis,
    albums: list[tuple[str, Album]],
    drop: bool = False,
) -> int:
    """Write albums and their ranking entries. Returns the number of albums written.

    Each album's hash and ranking score are written in one transaction so the
    ranking score always equals the stored like count.
    """
    if drop:
        await _drop_data(client)

    for album_id, album in albums:
        async with client.pipeline(transaction=True) as pipe:
            pipe.hset(album_key(album_id), mapping=album.to_fields())
            pipe.zadd(RANKING_KEY, {album_id: album.likes})
            await pipe.execute()
        logger.debug("Seeded album %s (%s by %s)", album_id, album.title, album.artist)

    logger.info("Seeded %d album(s)", len(albums))
    return len(albums)


async def _main(drop: bool) -> None:
    client = redis.Redis(connection_pool=create_pool())
    try:
        await seed(client, SAMPLE_ALBUMS, drop=drop)
    finally:
        await client.aclose(close_connection_pool=True)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed Redis with the sample album records")
    parser.add_argument("--drop", action="store_true", help="Delete existing albums before seeding")
    args = parser.parse_args()

    try:
        asyncio.run(_main(args.drop))
    except RedisError as e:
        logger.error("Seeding failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
