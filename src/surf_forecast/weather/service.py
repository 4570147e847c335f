"""Forecast service: cache-aside access to StormGlass forecast points."""

import logging
from typing import List, Optional

from surf_forecast.cache import ForecastCache, create_forecast_cache
from surf_forecast.config import CACHE_TTL_SECONDS
from surf_forecast.weather.client import StormGlassClient
from surf_forecast.weather.models import ForecastPoint
from surf_forecast.weather.normalizer import normalize_response

logger = logging.getLogger(__name__)


def get_cache_key(lat: float, lng: float) -> str:
    """Build the cache key for a coordinate pair.

    Uses the shortest round-trip repr of each float, so equal coordinates
    always give the same key and different ones never collide.
    """
    return f"forecast_points_{float(lat)!r}_{float(lng)!r}"


class ForecastService:
    """Serves normalized forecast points, reading through a TTL cache.

    Concurrent misses for the same coordinates are not coordinated: each
    fetches from StormGlass and writes the cache, and the last write wins.
    Entries are derived data, so the duplicate write is harmless.
    """

    def __init__(
        self,
        client: Optional[StormGlassClient] = None,
        cache: Optional[ForecastCache] = None,
        cache_ttl: int = CACHE_TTL_SECONDS
    ):
        """Initialize the forecast service.

        Args:
            client: StormGlass client instance (creates default if None)
            cache: Forecast cache backend (creates configured default if None)
            cache_ttl: Lifetime of cached entries in seconds
        """
        self.client = client or StormGlassClient()
        self.cache = cache or create_forecast_cache()
        self.cache_ttl = cache_ttl

    async def fetch_points(self, lat: float, lng: float) -> List[ForecastPoint]:
        """Get forecast points for coordinates, from cache when available.

        Args:
            lat: Latitude in decimal degrees
            lng: Longitude in decimal degrees

        Returns:
            Normalized hourly forecast points

        Raises:
            StormGlassResponseError: If StormGlass answers with an error status
            ClientRequestError: If StormGlass cannot be reached
            StormGlassUnexpectedResponseError: If the StormGlass body is unusable
        """
        cache_key = get_cache_key(lat, lng)

        cached_points = await self._get_points_from_cache(cache_key)
        if cached_points:
            return cached_points

        forecast_points = await self._get_points_from_api(lat, lng)
        await self._set_points_in_cache(cache_key, forecast_points)
        return forecast_points

    async def _get_points_from_api(self, lat: float, lng: float) -> List[ForecastPoint]:
        raw = await self.client.fetch_point_forecast(lat, lng)
        return normalize_response(raw, self.client.source)

    async def _get_points_from_cache(self, key: str) -> Optional[List[ForecastPoint]]:
        try:
            points = await self.cache.get(key)
        except Exception as e:
            # Fetch from upstream if the cache is down
            logger.error(f"Cache read failed for key {key}: {e}")
            return None

        if not points:
            return None

        logger.info(f"Using cache to return forecast points for key: {key}")
        return points

    async def _set_points_in_cache(self, key: str, points: List[ForecastPoint]) -> bool:
        logger.info(f"Updating cache to return forecast points for key: {key}")
        try:
            stored = await self.cache.set(key, points, self.cache_ttl)
        except Exception as e:
            logger.error(f"Cache write failed for key {key}: {e}")
            return False

        if not stored:
            logger.error(f"Cache write rejected for key {key}")
        return bool(stored)

    async def aclose(self):
        """Close the StormGlass client and the cache connection."""
        try:
            await self.client.aclose()
        finally:
            await self.cache.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
