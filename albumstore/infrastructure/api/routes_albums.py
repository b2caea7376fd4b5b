"""Album endpoints — show an album and like it."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, HTTPException, Query
from fastapi.responses import PlainTextResponse, RedirectResponse

from albumstore.application.use_cases.find_album import FindAlbumUseCase
from albumstore.application.use_cases.like_album import LikeAlbumUseCase
from albumstore.config import settings
from albumstore.domain.errors import AlbumNotFoundError, StoreError
from albumstore.infrastructure.api.dependencies import get_find_album_uc, get_like_album_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["albums"])


@router.get("/album", response_class=PlainTextResponse)
async def show_album(
    album_id: str | None = Query(default=None, alias="id"),
    uc: FindAlbumUseCase = Depends(get_find_album_uc),
):
    """Render one album as a line of plain text."""
    if not album_id:
        raise HTTPException(status_code=400, detail="Bad Request")

    try:
        album = await uc.execute(album_id)
    except AlbumNotFoundError:
        raise HTTPException(status_code=404, detail="Album not found")
    except StoreError:
        logger.exception("Failed to load album %s", album_id)
        raise HTTPException(status_code=500, detail="Internal Server Error")

    return album.describe(settings.currency_symbol)


@router.post("/like")
async def add_like(
    album_id: str | None = Form(default=None, alias="id"),
    uc: LikeAlbumUseCase = Depends(get_like_album_uc),
):
    """Like an album, then redirect to its page."""
    if not album_id:
        raise HTTPException(status_code=400, detail="Bad Request")

    try:
        await uc.execute(album_id)
    except AlbumNotFoundError:
        raise HTTPException(status_code=404, detail="Album not found")
    except StoreError:
        logger.exception("Failed to like album %s", album_id)
        raise HTTPException(status_code=500, detail="Internal Server Error")

    return RedirectResponse(url="/album?" + urlencode({"id": album_id}), status_code=303)
