"""Thin client for the OpenWeather geocoding, current-weather and air-pollution APIs."""
from __future__ import annotations

from typing import Any, Callable

import requests

from city_weather import config
from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="openweather_client")

GEOCODING_LIMIT = 1


class OpenWeatherClient:
    """Issue single, non-retried GET requests against OpenWeather.

    Each request runs in its own short-lived session from ``session_factory``.

    Every method returns the decoded JSON body. Transport failures and non-2xx
    responses raise ``requests.RequestException``; undecodable bodies raise
    ``ValueError``. Mapping those to outcome codes is left to the services.
    """

    def __init__(
        self,
        api_key: str,
        *,
        geocoding_url: str,
        weather_url: str,
        air_pollution_url: str,
        timeout: float = 10.0,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        if not api_key:
            raise config.ConfigurationError("OpenWeather API key not configured")
        self._api_key = api_key
        self.geocoding_url = geocoding_url
        self.weather_url = weather_url
        self.air_pollution_url = air_pollution_url
        self.timeout = timeout
        self.session_factory = session_factory

    @classmethod
    def from_settings(
        cls,
        settings: config.Settings | None = None,
        *,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> "OpenWeatherClient":
        """Build a client from settings, failing fast when no API key is set."""
        settings = settings or config.settings
        return cls(
            config.require_api_key(settings),
            geocoding_url=settings.geocoding_url,
            weather_url=settings.weather_url,
            air_pollution_url=settings.air_pollution_url,
            timeout=settings.request_timeout_seconds,
            session_factory=session_factory,
        )

    def _get_json(self, url: str, params: dict) -> Any:
        """GET ``url`` with the API key appended and return the decoded body."""
        with self.session_factory() as session:
            resp = session.get(url, params={**params, "appid": self._api_key}, timeout=self.timeout)
        logger.debug("OpenWeather GET %s -> %s", mask_url(resp.url), resp.status_code)
        resp.raise_for_status()
        return resp.json()

    def fetch_geocoding(self, city: str) -> Any:
        """Return the raw direct-geocoding match list for ``city`` (closest match only)."""
        return self._get_json(self.geocoding_url, {"q": city, "limit": GEOCODING_LIMIT})

    def fetch_current_weather(self, latitude: float, longitude: float) -> Any:
        """Return the raw current-weather payload in metric units."""
        return self._get_json(
            self.weather_url,
            {"lat": latitude, "lon": longitude, "units": "metric"},
        )

    def fetch_air_pollution(self, latitude: float, longitude: float) -> Any:
        """Return the raw current air-pollution payload."""
        return self._get_json(self.air_pollution_url, {"lat": latitude, "lon": longitude})
