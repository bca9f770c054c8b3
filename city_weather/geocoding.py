"""Resolve city names to coordinates through OpenWeather direct geocoding."""
from __future__ import annotations

from typing import List, Optional

import requests
from pydantic import TypeAdapter

from city_weather.models import GeoLocation
from city_weather.openweather_client import OpenWeatherClient
from city_weather.result import Err, Ok, Result
from city_weather.status import ResultStatus
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="geocoding")

_LOCATIONS = TypeAdapter(List[GeoLocation])


def validate_city_name(name: Optional[str]) -> ResultStatus:
    """Reject ``None``, empty and whitespace-only city names."""
    if name is None or not name.strip():
        return ResultStatus.CITY_NAME_IS_EMPTY
    return ResultStatus.OK


class GeoCodingService:
    """Single-attempt city resolver; failures come back as ``Err`` statuses."""

    def __init__(self, client: OpenWeatherClient) -> None:
        self.client = client

    def resolve_city(self, name: Optional[str]) -> Result[List[GeoLocation]]:
        """Return the upstream matches for ``name``, closest match first."""
        valid = validate_city_name(name)
        if valid is not ResultStatus.OK:
            return Err(valid)

        try:
            payload = self.client.fetch_geocoding(name)
            locations = _LOCATIONS.validate_python(payload)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", name, exc)
            return Err(ResultStatus.FAILED_TO_GET_GEO_CODING)

        if not locations:
            logger.info("No geocoding match for %r", name)
            return Err(ResultStatus.FAILED_TO_GET_GEO_CODING)

        logger.debug("Resolved %r to %d location(s)", name, len(locations))
        return Ok(locations)
