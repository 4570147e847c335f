"""Configuration settings for the surf forecast client."""

import os
from typing import Final, List
from dotenv import load_dotenv

load_dotenv()

# Fields requested from StormGlass, in the order the API documents them
FORECAST_FIELDS: Final[List[str]] = [
    "swellDirection",
    "swellHeight",
    "swellPeriod",
    "waveDirection",
    "waveHeight",
    "windDirection",
    "windSpeed",
]

# StormGlass API configuration
STORMGLASS_API_URL: str = os.getenv("STORMGLASS_API_URL", "https://api.stormglass.io/v2")
STORMGLASS_API_TOKEN: str = os.getenv("STORMGLASS_API_TOKEN", "")
# Every point needs all of FORECAST_FIELDS, so the requested params are derived from it
STORMGLASS_API_PARAMS: Final[str] = ",".join(FORECAST_FIELDS)
STORMGLASS_API_SOURCE: str = os.getenv("STORMGLASS_API_SOURCE", "noaa")
STORMGLASS_TIMEOUT_SECONDS: float = float(os.getenv("STORMGLASS_TIMEOUT_SECONDS", "30"))

# Forecast horizon requested from upstream
FORECAST_DAYS_AHEAD: Final[int] = 1

# Cache configuration
CACHE_BACKEND: str = os.getenv("CACHE_BACKEND", "redis").lower()  # "redis" or "memory"
CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "3600"))  # 1 hour default
REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
CACHE_PREFIX: str = os.getenv("CACHE_PREFIX", "surf-forecast")
