"""Redis implementation of the LogoCache interface."""

import redis
from portfolio_common.logging import setup_logging

from exceptions import CacheServiceError
from infrastructure.interfaces import LogoCache

logger = setup_logging()


class RedisLogoCache(LogoCache):
    """Keeps every name-to-logo entry as a field of one Redis hash, without expiry."""

    def __init__(self, client: redis.Redis, hash_key: str):
        self._client = client
        self._hash_key = hash_key

    def get(self, name: str) -> str | None:
        try:
            value = self._client.hget(self._hash_key, name)
            if value:
                logger.info("Logo cache hit", extra={"org": name})
            return value
        except redis.RedisError as e:
            logger.exception("Redis hget failed", extra={"org": name})
            raise CacheServiceError(name, "get", cause=e) from e

    def set(self, name: str, storage_key: str) -> None:
        try:
            self._client.hset(self._hash_key, name, storage_key)
            logger.info(
                "Logo cache set", extra={"org": name, "storage_key": storage_key}
            )
        except redis.RedisError as e:
            logger.exception("Redis hset failed", extra={"org": name})
            raise CacheServiceError(name, "set", cause=e) from e
