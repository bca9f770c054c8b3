"""HTTP API for geocoding, weather and air-quality lookups by city name.

Every endpoint answers 200 with a ``{entries, result, status}`` envelope; the
outcome lives in ``status.code`` / ``status.message``.
"""

from functools import lru_cache
from typing import Any, Generic, List, Optional, TypeVar

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from .config import settings
from .geocoding import GeoCodingService
from .models import AirQualitySnapshot, CombinedView, GeoLocation, WeatherSnapshot
from .openweather_client import OpenWeatherClient
from .result import Result
from .status import StatusInfo, status_info
from .weather_service import WeatherService
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="app/api")

T = TypeVar("T")


class ApiResult(BaseModel, Generic[T]):
    """Response envelope shared by all endpoints."""
    entries: Any = None
    result: Optional[T] = None
    status: StatusInfo


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    """Build the service graph once; raises ConfigurationError without an API key."""
    client = OpenWeatherClient.from_settings(settings)
    geocoding = GeoCodingService(client)
    logger.info("OpenWeather services ready")
    return WeatherService(client, geocoding)


def get_geocoding_service(service: WeatherService = Depends(get_weather_service)) -> GeoCodingService:
    return service.geocoding


def _envelope(outcome: Result, default: Any = None) -> dict:
    """Turn a lookup result into envelope fields."""
    return {
        "entries": None,
        "result": outcome.value_or(default),
        "status": status_info(outcome.status),
    }


geocoding_router = APIRouter(prefix="/GeoCoding", tags=["GeoCoding"])
weather_router = APIRouter(prefix="/Weather", tags=["Weather"])


@geocoding_router.get("/GetGeoCoding/{city}", response_model=ApiResult[List[GeoLocation]])
def get_geocoding(city: str, geocoding: GeoCodingService = Depends(get_geocoding_service)):
    """Resolve a city name to its closest upstream match."""
    outcome = geocoding.resolve_city(city)
    logger.info("GetGeoCoding %r -> %s", city, outcome.status.name)
    return ApiResult[List[GeoLocation]](**_envelope(outcome, default=[]))


@weather_router.get("/GetWeather/{city_name}", response_model=ApiResult[WeatherSnapshot])
def get_weather(city_name: str, service: WeatherService = Depends(get_weather_service)):
    """Current weather (metric) for a city."""
    outcome = service.weather_by_city(city_name)
    logger.info("GetWeather %r -> %s", city_name, outcome.status.name)
    return ApiResult[WeatherSnapshot](**_envelope(outcome))


@weather_router.get("/GetAirQuality/{city_name}", response_model=ApiResult[AirQualitySnapshot])
def get_air_quality(city_name: str, service: WeatherService = Depends(get_weather_service)):
    """Current air pollution for a city."""
    outcome = service.air_quality_by_city(city_name)
    logger.info("GetAirQuality %r -> %s", city_name, outcome.status.name)
    return ApiResult[AirQualitySnapshot](**_envelope(outcome))


@weather_router.get("/GetWeatherAndAirQuality/{city_name}", response_model=ApiResult[CombinedView])
def get_weather_and_air_quality(city_name: str, service: WeatherService = Depends(get_weather_service)):
    """Weather and air quality merged into a single flat record."""
    outcome = service.combined(city_name)
    logger.info("GetWeatherAndAirQuality %r -> %s", city_name, outcome.status.name)
    return ApiResult[CombinedView](**_envelope(outcome))


router = APIRouter()
router.include_router(geocoding_router)
router.include_router(weather_router)
