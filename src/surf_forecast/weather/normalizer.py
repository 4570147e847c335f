"""Normalization of raw StormGlass responses into forecast points."""

import logging
import math
from typing import Any, Dict, List, Mapping

from surf_forecast.config import FORECAST_FIELDS
from surf_forecast.weather.models import ForecastPoint, StormGlassForecastResponse

logger = logging.getLogger(__name__)


def _source_value(point: Mapping[str, Any], field: str, source: str) -> Any:
    sources = point.get(field)
    if not isinstance(sources, Mapping):
        return None
    return sources.get(source)


def is_valid_point(point: Any, source: str) -> bool:
    """Check that a raw hourly record can be turned into a ForecastPoint.

    A record is valid when it has a non-empty ``time`` and every forecast field
    holds a truthy, finite number under ``source``. Zero counts as missing, so a
    real 0 degree direction is dropped along with absent values. NaN and
    infinities are rejected since they do not survive a JSON round trip.
    """
    if not isinstance(point, Mapping):
        return False
    time = point.get("time")
    if not isinstance(time, str) or not time:
        return False

    for field in FORECAST_FIELDS:
        value = _source_value(point, field, source)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if not value or not math.isfinite(value):
            return False
    return True


def normalize_response(raw: StormGlassForecastResponse, source: str) -> List[ForecastPoint]:
    """Project the valid hourly records of ``raw`` onto ForecastPoint.

    Args:
        raw: Validated StormGlass response
        source: Data source name whose values are kept (e.g. "noaa")

    Returns:
        Forecast points in upstream order; invalid records are skipped
    """
    points = []
    for hour in raw.hours:
        if not is_valid_point(hour, source):
            continue
        values: Dict[str, Any] = {
            field: _source_value(hour, field, source) for field in FORECAST_FIELDS
        }
        points.append(ForecastPoint(time=hour["time"], **values))

    dropped = len(raw.hours) - len(points)
    if dropped:
        logger.debug(f"Dropped {dropped} of {len(raw.hours)} hourly records without '{source}' data")
    return points
