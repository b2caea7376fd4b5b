"""Redis album store adapter — implements AlbumStore."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import redis.asyncio as redis
from redis.exceptions import RedisError

from albumstore.application.ports.album_store import (
    AlbumStore,
    HashIncrement,
    MutationIntent,
    RankingIncrement,
)
from albumstore.domain.errors import StoreError

logger = logging.getLogger(__name__)

# KEYS[i] is the target of intent i; ARGV holds (op, field-or-member, amount)
# triples. Every target is validated before the first write, so a rejected
# batch leaves the store untouched. Hash values are capped at 18 digits so
# HINCRBY cannot overflow.
COMMIT_SCRIPT = """
local function check(i)
  local op, name = ARGV[3 * i - 2], ARGV[3 * i - 1]
  local reply
  if op == 'hincrby' then
    reply = redis.pcall('HGET', KEYS[i], name)
    if type(reply) == 'table' and reply.err then return reply end
    if reply and not (string.match(reply, '^%-?%d+$') and #reply <= 18) then
      return {err = 'ERR hash value is not an integer: ' .. KEYS[i] .. ' ' .. name}
    end
  elseif op == 'zincrby' then
    reply = redis.pcall('ZSCORE', KEYS[i], name)
    if type(reply) == 'table' and reply.err then return reply end
  else
    return {err = 'ERR unknown operation: ' .. tostring(op)}
  end
  return nil
end

for i = 1, #KEYS do
  local failure = check(i)
  if failure then return failure end
end

for i = 1, #KEYS do
  local op, name, amount = ARGV[3 * i - 2], ARGV[3 * i - 1], ARGV[3 * i]
  if op == 'hincrby' then
    redis.call('HINCRBY', KEYS[i], name, amount)
  else
    redis.call('ZINCRBY', KEYS[i], amount, name)
  end
end
return #KEYS
"""


class RedisAlbumStore(AlbumStore):
    """Album store backed by a Redis client with ``decode_responses=True``."""

    def __init__(self, client: redis.Redis):
        self._client = client
        self._commit_script = client.register_script(COMMIT_SCRIPT)

    async def get_fields(self, key: str) -> dict[str, str]:
        try:
            return await self._client.hgetall(key)
        except RedisError as e:
            logger.warning("HGETALL %s failed: %s", key, e)
            raise StoreError(f"Failed to read {key}: {e}") from e
        except UnicodeDecodeError as e:
            logger.error("HGETALL %s returned undecodable data: %s", key, e)
            raise StoreError(f"Failed to decode {key}: {e}") from e

    async def exists(self, key: str) -> bool:
        try:
            return await self._client.exists(key) > 0
        except RedisError as e:
            logger.warning("EXISTS %s failed: %s", key, e)
            raise StoreError(f"Failed to check {key}: {e}") from e

    async def commit(self, intents: Sequence[MutationIntent]) -> None:
        """Run every intent inside one script invocation; Redis executes it atomically."""
        if not intents:
            return

        keys: list[str] = []
        args: list[str] = []
        for intent in intents:
            key, triple = _encode(intent)
            keys.append(key)
            args.extend(triple)

        try:
            await self._commit_script(keys=keys, args=args)
        except RedisError as e:
            logger.error("Commit of %d intent(s) rejected: %s", len(intents), e)
            raise StoreError(f"Transaction failed: {e}") from e

    async def ping(self) -> bool:
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning("PING failed: %s", e)
            raise StoreError(f"Store unreachable: {e}") from e


def _encode(intent: MutationIntent) -> tuple[str, tuple[str, str, str]]:
    """Translate one intent into its script key and (op, name, amount) arguments."""
    if isinstance(intent, HashIncrement):
        return intent.key, ("hincrby", intent.field, str(intent.amount))
    if isinstance(intent, RankingIncrement):
        return intent.key, ("zincrby", intent.member, repr(float(intent.amount)))
    raise TypeError(f"Unsupported mutation intent: {intent!r}")
