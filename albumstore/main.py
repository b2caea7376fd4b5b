"""Album store — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI
from redis.exceptions import RedisError

from albumstore.adapters.redis_store.connection import create_pool
from albumstore.infrastructure.api.routes_albums import router as albums_router
from albumstore.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    app.state.redis_pool = create_pool()
    client = redis.Redis(connection_pool=app.state.redis_pool)
    try:
        await client.ping()
        logger.info("Redis connection established")
    except RedisError as e:
        logger.warning("Redis not available on startup: %s", e)
    finally:
        await client.aclose()
    yield
    await app.state.redis_pool.disconnect()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Album Store",
        description="Album records with atomic like counters and a likes ranking",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router)
    app.include_router(albums_router)

    return app


app = create_app()
