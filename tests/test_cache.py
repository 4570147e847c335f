"""Tests for forecast cache backends."""

from unittest.mock import AsyncMock

import pytest

from surf_forecast.cache import (
    InMemoryForecastCache,
    RedisForecastCache,
    create_forecast_cache,
)
from surf_forecast.weather.models import ForecastPointList


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestInMemoryForecastCache:
    async def test_get_missing(self):
        cache = InMemoryForecastCache()
        assert await cache.get("forecast_points_1.0_2.0") is None

    async def test_set_then_get(self, forecast_points):
        cache = InMemoryForecastCache()

        assert await cache.set("key", forecast_points, 60) is True
        assert await cache.get("key") == forecast_points

    async def test_entry_expires(self, forecast_points):
        clock = FakeClock()
        cache = InMemoryForecastCache(time_func=clock)
        await cache.set("key", forecast_points, 60)

        clock.now += 59
        assert await cache.get("key") == forecast_points

        clock.now += 1
        assert await cache.get("key") is None

    async def test_overwrite_resets_ttl(self, forecast_points):
        clock = FakeClock()
        cache = InMemoryForecastCache(time_func=clock)
        await cache.set("key", [], 10)
        await cache.set("key", forecast_points, 60)

        clock.now += 30
        assert await cache.get("key") == forecast_points


class TestRedisForecastCache:
    async def test_get_missing(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = None
        cache = RedisForecastCache(redis_client, prefix="test")

        assert await cache.get("key") is None
        redis_client.get.assert_awaited_once_with("test:key")

    async def test_set_uses_expiry(self, forecast_points):
        redis_client = AsyncMock()
        redis_client.set.return_value = True
        cache = RedisForecastCache(redis_client, prefix="test")

        assert await cache.set("key", forecast_points, 3600) is True

        redis_client.set.assert_awaited_once_with(
            "test:key", ForecastPointList.dump_json(forecast_points), ex=3600
        )

    async def test_get_decodes_stored_points(self, forecast_points):
        redis_client = AsyncMock()
        redis_client.get.return_value = ForecastPointList.dump_json(forecast_points)
        cache = RedisForecastCache(redis_client, prefix="test")

        assert await cache.get("key") == forecast_points

    async def test_get_corrupt_payload_raises(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = b"not json"
        cache = RedisForecastCache(redis_client, prefix="test")

        with pytest.raises(ValueError):
            await cache.get("key")

    async def test_aclose(self):
        redis_client = AsyncMock()
        cache = RedisForecastCache(redis_client)

        await cache.aclose()

        redis_client.aclose.assert_awaited_once()


class TestCreateForecastCache:
    def test_memory(self):
        assert isinstance(create_forecast_cache("memory"), InMemoryForecastCache)

    def test_redis(self):
        cache = create_forecast_cache("redis", "redis://localhost:6379/1")
        assert isinstance(cache, RedisForecastCache)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown cache backend"):
            create_forecast_cache("memcached")
