"""Weather, air-quality and combined lookups keyed by city name or coordinates."""
from __future__ import annotations

import datetime as dt
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Optional

import requests

from city_weather.geocoding import GeoCodingService, validate_city_name
from city_weather.models import (
    AirQualitySnapshot,
    CombinedView,
    PollutantLevels,
    WeatherSnapshot,
)
from city_weather.openweather_client import OpenWeatherClient
from city_weather.result import Err, Ok, Result
from city_weather.status import ResultStatus
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="weather_service")


def build_combined_view(
    latitude: float,
    longitude: float,
    weather: WeatherSnapshot,
    air: AirQualitySnapshot,
) -> CombinedView:
    """Flatten a weather snapshot and the current air sample into one view.

    Coordinates come from geocoding, not from either upstream payload.
    Raises ``IndexError`` when ``air`` has no samples.
    """
    current_air = air.list[0]
    components = current_air.components
    return CombinedView(
        latitude=latitude,
        longitude=longitude,
        city_name=weather.name,
        temperature=weather.main.temp,
        humidity=weather.main.humidity,
        wind_speed=weather.wind.speed,
        air_quality_index=current_air.main.aqi,
        pollutants=PollutantLevels(
            pm2_5=components.pm2_5,
            pm10=components.pm10,
            co=components.co,
            no2=components.no2,
            o3=components.o3,
            so2=components.so2,
            nh3=components.nh3,
            no=components.no,
        ),
        timestamp=dt.datetime.fromtimestamp(weather.dt, tz=dt.timezone.utc),
    )


class WeatherService:
    """Current weather and air quality for a city, separately or merged."""

    def __init__(self, client: OpenWeatherClient, geocoding: GeoCodingService) -> None:
        self.client = client
        self.geocoding = geocoding

    # -- weather ------------------------------------------------------------

    def weather_by_coordinates(self, latitude: float, longitude: float) -> Result[WeatherSnapshot]:
        """Fetch current metric weather for a coordinate pair."""
        try:
            payload = self.client.fetch_current_weather(latitude, longitude)
            if payload is None:
                raise ValueError("empty weather payload")
            snapshot = WeatherSnapshot.model_validate(payload)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Weather lookup failed for (%s, %s): %s", latitude, longitude, exc)
            return Err(ResultStatus.FAILED_TO_GET_WEATHER_DATA)
        return Ok(snapshot)

    def weather_by_city(self, name: Optional[str]) -> Result[WeatherSnapshot]:
        valid = validate_city_name(name)
        if valid is not ResultStatus.OK:
            return Err(valid)

        resolved = self.geocoding.resolve_city(name)
        if not resolved.is_ok():
            return Err(resolved.status)

        location = resolved.value[0]
        return self.weather_by_coordinates(location.lat, location.lon)

    # -- air quality --------------------------------------------------------

    def air_quality_by_coordinates(self, latitude: float, longitude: float) -> Result[AirQualitySnapshot]:
        """Fetch current air pollution for a coordinate pair.

        A response without any samples is treated as a failed lookup.
        """
        try:
            payload = self.client.fetch_air_pollution(latitude, longitude)
            if payload is None:
                raise ValueError("empty air-pollution payload")
            snapshot = AirQualitySnapshot.model_validate(payload)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Air-quality lookup failed for (%s, %s): %s", latitude, longitude, exc)
            return Err(ResultStatus.FAILED_TO_GET_AIR_QUALITY)

        if not snapshot.list:
            logger.warning("Air-quality response for (%s, %s) has no samples", latitude, longitude)
            return Err(ResultStatus.FAILED_TO_GET_AIR_QUALITY)
        return Ok(snapshot)

    def air_quality_by_city(self, name: Optional[str]) -> Result[AirQualitySnapshot]:
        valid = validate_city_name(name)
        if valid is not ResultStatus.OK:
            return Err(valid)

        resolved = self.geocoding.resolve_city(name)
        if not resolved.is_ok():
            return Err(resolved.status)

        location = resolved.value[0]
        return self.air_quality_by_coordinates(location.lat, location.lon)

    # -- combined -----------------------------------------------------------

    def combined(self, name: Optional[str]) -> Result[CombinedView]:
        """Resolve ``name`` once, then fetch weather and air quality side by side.

        Both upstream calls always run to completion before either result is
        inspected. A weather failure wins over an air-quality failure.
        """
        valid = validate_city_name(name)
        if valid is not ResultStatus.OK:
            return Err(valid)

        try:
            resolved = self.geocoding.resolve_city(name)
            if not resolved.is_ok():
                # Reported as FAILED_TO_GET_AIR_QUALITY, not the geocoding status.
                # TODO: switch to resolved.status once API consumers stop keying on code 5.
                return Err(ResultStatus.FAILED_TO_GET_AIR_QUALITY)

            location = resolved.value[0]
            lat, lon = location.lat, location.lon

            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="combined") as pool:
                weather_future = pool.submit(self.weather_by_coordinates, lat, lon)
                air_future = pool.submit(self.air_quality_by_coordinates, lat, lon)
                wait([weather_future, air_future])

            weather = weather_future.result()
            air = air_future.result()

            if not weather.is_ok():
                return Err(weather.status)
            if not air.is_ok():
                return Err(air.status)

            view = build_combined_view(lat, lon, weather.value, air.value)
        except Exception:
            logger.exception("Combined lookup failed for %r", name)
            return Err(ResultStatus.FAILED_TO_GET_COMBINED_WEATHER_DATA)

        logger.info("Combined lookup for %r succeeded (aqi=%s)", name, view.air_quality_index)
        return Ok(view)
