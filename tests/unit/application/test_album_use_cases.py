"""Tests for FindAlbumUseCase and LikeAlbumUseCase with an in-memory fake store."""

from __future__ import annotations

import pytest

from albumstore.application.ports.album_store import (
    AlbumStore,
    HashIncrement,
    RankingIncrement,
)
from albumstore.application.use_cases.find_album import FindAlbumUseCase
from albumstore.application.use_cases.like_album import LikeAlbumUseCase
from albumstore.domain.errors import AlbumNotFoundError, StoreError

# ─── In-memory fake ─────────────────────────────────────────────────


class FakeAlbumStore(AlbumStore):
    def __init__(self):
        self.hashes: dict[str, dict[str, str]] = {}
        self.rankings: dict[str, dict[str, float]] = {}
        self.commits: list[list] = []
        self.connected = True

    def _check(self):
        if not self.connected:
            raise StoreError("connection refused")

    async def get_fields(self, key):
        self._check()
        return dict(self.hashes.get(key, {}))

    async def exists(self, key):
        self._check()
        return key in self.hashes

    async def commit(self, intents):
        self._check()
        self.commits.append(list(intents))
        for intent in intents:
            if isinstance(intent, HashIncrement):
                fields = self.hashes.setdefault(intent.key, {})
                fields[intent.field] = str(int(fields.get(intent.field, "0")) + intent.amount)
            else:
                ranking = self.rankings.setdefault(intent.key, {})
                ranking[intent.member] = ranking.get(intent.member, 0) + intent.amount

    async def ping(self):
        self._check()
        return True

    def ranking_score(self, album_id):
        return self.rankings.get("likes", {}).get(album_id)


@pytest.fixture
def store(abbey_road):
    s = FakeAlbumStore()
    s.hashes["album:1"] = abbey_road.to_fields()
    s.rankings["likes"] = {"1": 5}
    return s


# ─── Find ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_find_existing_album(store, abbey_road):
    album = await FindAlbumUseCase(store).execute("1")
    assert album == abbey_road


@pytest.mark.asyncio
async def test_find_missing_album(store):
    with pytest.raises(AlbumNotFoundError) as exc_info:
        await FindAlbumUseCase(store).execute("999")
    assert exc_info.value.album_id == "999"


@pytest.mark.asyncio
async def test_find_malformed_record_is_store_error(store):
    store.hashes["album:2"] = {"title": "Broken", "artist": "Nobody", "price": "n/a", "likes": "0"}
    with pytest.raises(StoreError):
        await FindAlbumUseCase(store).execute("2")


@pytest.mark.asyncio
async def test_find_disconnected_store_is_not_not_found(store):
    store.connected = False
    with pytest.raises(StoreError):
        await FindAlbumUseCase(store).execute("1")


# ─── Like ───────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_like_increments_record_and_ranking(store):
    await LikeAlbumUseCase(store).execute("1")
    album = await FindAlbumUseCase(store).execute("1")
    assert album.likes == 6
    assert store.ranking_score("1") == 6


@pytest.mark.asyncio
async def test_like_submits_single_batch(store):
    await LikeAlbumUseCase(store).execute("1")
    assert store.commits == [[
        HashIncrement(key="album:1", field="likes", amount=1),
        RankingIncrement(key="likes", member="1", amount=1),
    ]]


@pytest.mark.asyncio
async def test_like_is_not_idempotent(store):
    uc = LikeAlbumUseCase(store)
    await uc.execute("1")
    await uc.execute("1")
    album = await FindAlbumUseCase(store).execute("1")
    assert album.likes == 7
    assert store.ranking_score("1") == album.likes


@pytest.mark.asyncio
async def test_like_missing_album_mutates_nothing(store):
    with pytest.raises(AlbumNotFoundError):
        await LikeAlbumUseCase(store).execute("999")
    assert store.commits == []
    assert store.ranking_score("999") is None
    with pytest.raises(AlbumNotFoundError):
        await FindAlbumUseCase(store).execute("999")


@pytest.mark.asyncio
async def test_like_disconnected_store(store):
    store.connected = False
    with pytest.raises(StoreError):
        await LikeAlbumUseCase(store).execute("1")
    assert store.commits == []


@pytest.mark.asyncio
async def test_find_non_finite_price_is_store_error(store):
    store.hashes["album:3"] = {"title": "Priceless", "artist": "Nobody", "price": "nan", "likes": "0"}
    with pytest.raises(StoreError):
        await FindAlbumUseCase(store).execute("3")
