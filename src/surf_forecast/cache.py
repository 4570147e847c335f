"""Cache backends for normalized forecast points."""

import logging
import time
from typing import Callable, Dict, List, Optional, Protocol, Tuple

import redis.asyncio as redis

from surf_forecast.config import CACHE_BACKEND, CACHE_PREFIX, REDIS_URL
from surf_forecast.weather.models import ForecastPoint, ForecastPointList

logger = logging.getLogger(__name__)


class ForecastCache(Protocol):
    """Key-value store with per-entry TTL used by ForecastService."""

    async def get(self, key: str) -> Optional[List[ForecastPoint]]:
        ...

    async def set(self, key: str, value: List[ForecastPoint], ttl_seconds: int) -> bool:
        ...

    async def aclose(self) -> None:
        ...


class RedisForecastCache:
    """Forecast cache stored in Redis as JSON with a native expiry."""

    def __init__(self, redis_client: Optional[redis.Redis] = None, prefix: str = CACHE_PREFIX):
        """Initialize the Redis cache.

        Args:
            redis_client: Optional Redis client. If None, creates new client.
            prefix: Namespace prepended to every key
        """
        self.redis_client = redis_client or redis.from_url(REDIS_URL)
        self.prefix = prefix

    def _full_key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    async def get(self, key: str) -> Optional[List[ForecastPoint]]:
        """Return the cached points for ``key``, or None when absent or expired."""
        raw = await self.redis_client.get(self._full_key(key))
        if raw is None:
            return None
        return ForecastPointList.validate_json(raw)

    async def set(self, key: str, value: List[ForecastPoint], ttl_seconds: int) -> bool:
        """Store ``value`` under ``key`` for ``ttl_seconds``."""
        payload = ForecastPointList.dump_json(value)
        result = await self.redis_client.set(self._full_key(key), payload, ex=ttl_seconds)
        return bool(result)

    async def aclose(self) -> None:
        """Close Redis connection."""
        if self.redis_client:
            await self.redis_client.aclose()


class InMemoryForecastCache:
    """Process-local TTL cache, for single-process use and tests."""

    def __init__(self, time_func: Callable[[], float] = time.monotonic):
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, List[ForecastPoint]]] = {}

    async def get(self, key: str) -> Optional[List[ForecastPoint]]:
        item = self._storage.get(key)
        if item is None:
            return None
        expires_at, value = item
        if expires_at <= self._time_func():
            self._storage.pop(key, None)
            return None
        return list(value)

    async def set(self, key: str, value: List[ForecastPoint], ttl_seconds: int) -> bool:
        self._storage[key] = (self._time_func() + ttl_seconds, list(value))
        return True

    async def aclose(self) -> None:
        self._storage.clear()


def create_forecast_cache(backend: str = CACHE_BACKEND, redis_url: str = REDIS_URL) -> ForecastCache:
    """Build the cache backend named by ``backend`` ("redis" or "memory")."""
    if backend == "memory":
        logger.info("Using in-memory forecast cache")
        return InMemoryForecastCache()
    if backend == "redis":
        logger.info(f"Using Redis forecast cache at {redis_url}")
        return RedisForecastCache(redis.from_url(redis_url))
    raise ValueError(f"Unknown cache backend: {backend}")
