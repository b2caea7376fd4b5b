"""Redis connection pool factory."""

from __future__ import annotations

import logging

import redis.asyncio as redis

from albumstore.config import settings

logger = logging.getLogger(__name__)


def create_pool(url: str | None = None) -> redis.ConnectionPool:
    """Build the shared pool; clients borrow a connection per command."""
    url = url or settings.redis_url
    pool = redis.ConnectionPool.from_url(
        url,
        max_connections=settings.redis_max_connections,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
        health_check_interval=settings.redis_health_check_interval,
        decode_responses=True,
    )
    logger.info(
        "Redis pool created for %s (max_connections=%d)",
        url, settings.redis_max_connections,
    )
    return pool
