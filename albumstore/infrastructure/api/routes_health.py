"""Health check endpoint."""

from fastapi import APIRouter, Depends

from albumstore.application.ports.album_store import AlbumStore
from albumstore.domain.errors import StoreError
from albumstore.infrastructure.api.dependencies import get_album_store

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(store: AlbumStore = Depends(get_album_store)):
    """Check API and store connectivity."""
    try:
        await store.ping()
        store_status = "connected"
    except StoreError as e:
        store_status = f"error: {e}"

    return {
        "status": "ok" if store_status == "connected" else "degraded",
        "store": store_status,
        "service": "albumstore",
    }
