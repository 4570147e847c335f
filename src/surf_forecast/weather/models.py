"""Data models for the StormGlass forecast client."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ForecastPoint(BaseModel):
    """Normalized hourly forecast point.

    Field names follow the StormGlass parameter names so cached payloads and
    upstream requests share one vocabulary.
    """
    model_config = ConfigDict(frozen=True)

    time: str = Field(..., description="Timestamp as returned by StormGlass")
    swellDirection: float = Field(..., description="Swell direction in degrees")
    swellHeight: float = Field(..., description="Swell height in meters")
    swellPeriod: float = Field(..., description="Swell period in seconds")
    waveDirection: float = Field(..., description="Wave direction in degrees")
    waveHeight: float = Field(..., description="Significant wave height in meters")
    windDirection: float = Field(..., description="Wind direction in degrees")
    windSpeed: float = Field(..., description="Wind speed in meters per second")


class StormGlassForecastResponse(BaseModel):
    """Raw response from the StormGlass weather point endpoint.

    Hourly records are left unvalidated: each one should map a parameter name
    to a ``{source: value}`` dict, and a malformed record (including a
    non-object entry) is dropped during normalization instead of failing
    validation for the whole response.
    """
    hours: List[Any] = Field(..., description="Hourly forecast records")


# Serializer for cached sequences of forecast points
ForecastPointList = TypeAdapter(List[ForecastPoint])
