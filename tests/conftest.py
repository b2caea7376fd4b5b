"""Pytest configuration and shared fixtures."""

import fakeredis
import pytest

from albumstore.domain.entities.album import Album


@pytest.fixture
def abbey_road():
    return Album(title="Abbey Road", artist="The Beatles", price=21.50, likes=5)


@pytest.fixture
def redis_server():
    """An isolated in-process Redis server shared by sync and async fake clients."""
    return fakeredis.FakeServer()


@pytest.fixture
def redis_sync(redis_server):
    return fakeredis.FakeRedis(server=redis_server, decode_responses=True)
