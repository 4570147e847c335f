"""HTTP client for the StormGlass weather API."""

import json
import logging

import httpx
from pydantic import ValidationError

from surf_forecast.config import (
    FORECAST_DAYS_AHEAD,
    STORMGLASS_API_PARAMS,
    STORMGLASS_API_SOURCE,
    STORMGLASS_API_TOKEN,
    STORMGLASS_API_URL,
    STORMGLASS_TIMEOUT_SECONDS,
)
from surf_forecast.errors import (
    ClientRequestError,
    StormGlassResponseError,
    StormGlassUnexpectedResponseError,
)
from surf_forecast.time_utils import get_unix_time_for_future_day
from surf_forecast.weather.models import StormGlassForecastResponse

logger = logging.getLogger(__name__)


class StormGlassClient:
    """Async client for fetching point forecasts from StormGlass."""

    def __init__(
        self,
        base_url: str = STORMGLASS_API_URL,
        api_token: str = STORMGLASS_API_TOKEN,
        params: str = STORMGLASS_API_PARAMS,
        source: str = STORMGLASS_API_SOURCE,
        timeout: float = STORMGLASS_TIMEOUT_SECONDS,
    ):
        """Initialize the StormGlass client.

        Args:
            base_url: Base URL for the StormGlass API
            api_token: Value sent in the Authorization header
            params: Comma-separated list of forecast fields to request; must
                include every field in FORECAST_FIELDS or all records are dropped
            source: Data source whose values are requested (e.g. "noaa")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.params = params
        self.source = source
        self.client = httpx.AsyncClient(
            headers={"Authorization": api_token},
            timeout=timeout
        )

    async def fetch_point_forecast(self, lat: float, lng: float) -> StormGlassForecastResponse:
        """Fetch the raw hourly forecast for the next day at given coordinates.

        Args:
            lat: Latitude in decimal degrees
            lng: Longitude in decimal degrees

        Returns:
            Raw StormGlass response

        Raises:
            StormGlassResponseError: If StormGlass answers with an error status
            ClientRequestError: If StormGlass cannot be reached
            StormGlassUnexpectedResponseError: If a successful response has an unusable body
        """
        url = f"{self.base_url}/weather/point"
        query = {
            "lat": lat,
            "lng": lng,
            "params": self.params,
            "source": self.source,
            "end": get_unix_time_for_future_day(FORECAST_DAYS_AHEAD),
        }

        logger.info(f"Fetching forecast points for lat={lat}, lng={lng}")

        try:
            response = await self.client.get(url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = self._serialize_body(e.response)
            logger.error(f"HTTP error from StormGlass API: {e.response.status_code} - {body}")
            raise StormGlassResponseError(body, e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error(f"Request error to StormGlass API: {e!r}")
            raise ClientRequestError(str(e) or e.__class__.__name__) from e

        try:
            forecast = StormGlassForecastResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Invalid StormGlass response format: {e}")
            raise StormGlassUnexpectedResponseError(f"Invalid StormGlass response format: {e}") from e

        logger.info(f"Successfully fetched forecast with {len(forecast.hours)} hourly entries")
        return forecast

    @staticmethod
    def _serialize_body(response: httpx.Response) -> str:
        """Return the error body as compact JSON, or raw text when it is not JSON."""
        try:
            return json.dumps(response.json())
        except ValueError:
            return response.text

    async def aclose(self):
        """Close the async HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
