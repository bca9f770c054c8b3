"""Pydantic schemas for OpenWeather payloads and the merged city view.

Upstream models keep OpenWeather's own field names so the weather and
air-quality endpoints can echo them back unchanged. Only the fields the merge
depends on are required; everything else is optional so partial payloads still
parse.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _UpstreamModel(BaseModel):
    """Base for OpenWeather payloads; unknown keys are dropped."""
    model_config = ConfigDict(extra="ignore")


# ---------------------------------------------------------------------------
# Geocoding
# ---------------------------------------------------------------------------

class GeoLocation(_UpstreamModel):
    """One match from the direct geocoding endpoint."""
    name: str
    local_names: Optional[Dict[str, str]] = None
    lat: float
    lon: float
    country: Optional[str] = None
    state: Optional[str] = None


# ---------------------------------------------------------------------------
# Current weather
# ---------------------------------------------------------------------------

class Coordinates(_UpstreamModel):
    lon: float
    lat: float


class WeatherCondition(_UpstreamModel):
    """Condition descriptor, e.g. ``{"id": 800, "main": "Clear"}``."""
    id: Optional[int] = None
    main: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class MainWeather(_UpstreamModel):
    """Atmospheric block of the current-weather response (metric units)."""
    temp: float
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[int] = None
    humidity: int
    sea_level: Optional[int] = None
    grnd_level: Optional[int] = None


class Wind(_UpstreamModel):
    speed: float
    deg: Optional[int] = None
    gust: Optional[float] = None


class Clouds(_UpstreamModel):
    all: Optional[int] = None


class SystemInfo(_UpstreamModel):
    type: Optional[int] = None
    id: Optional[int] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherSnapshot(_UpstreamModel):
    """Current weather for a coordinate pair as returned by ``/data/2.5/weather``."""
    coord: Optional[Coordinates] = None
    weather: List[WeatherCondition] = Field(default_factory=list)
    base: Optional[str] = None
    main: MainWeather
    visibility: Optional[int] = None
    wind: Wind
    clouds: Optional[Clouds] = None
    dt: int  # unix seconds
    sys: Optional[SystemInfo] = None
    timezone: Optional[int] = None  # offset from UTC in seconds
    id: Optional[int] = None
    name: str = ""
    cod: Optional[int] = None


# ---------------------------------------------------------------------------
# Air pollution
# ---------------------------------------------------------------------------

class AirQualityIndex(_UpstreamModel):
    aqi: int  # 1 = Good, 2 = Fair, 3 = Moderate, 4 = Poor, 5 = Very Poor


class PollutantComponents(_UpstreamModel):
    """Pollutant concentrations in µg/m³."""
    co: float = 0.0
    no: float = 0.0
    no2: float = 0.0
    o3: float = 0.0
    so2: float = 0.0
    pm2_5: float = 0.0
    pm10: float = 0.0
    nh3: float = 0.0


class AirQualitySample(_UpstreamModel):
    main: AirQualityIndex
    components: PollutantComponents = Field(default_factory=PollutantComponents)
    dt: int


class AirQualitySnapshot(_UpstreamModel):
    """Air-pollution response; the first sample in ``list`` is the current one."""
    coord: Optional[Coordinates] = None
    list: List[AirQualitySample] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Merged view
# ---------------------------------------------------------------------------

class PollutantLevels(BaseModel):
    pm2_5: float
    pm10: float
    co: float
    no2: float
    o3: float
    so2: float
    nh3: float
    no: float


class CombinedView(BaseModel):
    """Flattened weather + air-quality projection for a single city."""
    latitude: float
    longitude: float
    city_name: str = Field(serialization_alias="cityName")
    temperature: float
    humidity: int
    wind_speed: float = Field(serialization_alias="windSpeed")
    air_quality_index: int = Field(serialization_alias="airQualityIndex")
    pollutants: PollutantLevels
    timestamp: datetime
