"""Outcome codes reported in every API response instead of HTTP status codes."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict


class ResultStatus(IntEnum):
    """Fixed outcome taxonomy; the integer value is the wire code."""
    OK = 1
    UNDEFINED_ERROR = 2
    FAILED_TO_GET_GEO_CODING = 3
    FAILED_TO_GET_WEATHER_DATA = 4
    FAILED_TO_GET_AIR_QUALITY = 5
    FAILED_TO_GET_COMBINED_WEATHER_DATA = 6
    CITY_NAME_IS_EMPTY = 7


class StatusInfo(BaseModel):
    """Serialized `{code, message}` pair embedded in every response envelope."""
    model_config = ConfigDict(frozen=True)

    code: int
    message: str


STATUS_INFO: Mapping[ResultStatus, StatusInfo] = MappingProxyType({
    ResultStatus.OK: StatusInfo(code=1, message="OK"),
    ResultStatus.UNDEFINED_ERROR: StatusInfo(code=2, message="Undefined error"),
    ResultStatus.FAILED_TO_GET_GEO_CODING: StatusInfo(code=3, message="Cant get geo coding for this city"),
    ResultStatus.FAILED_TO_GET_WEATHER_DATA: StatusInfo(code=4, message="Can't receive weather data"),
    ResultStatus.FAILED_TO_GET_AIR_QUALITY: StatusInfo(code=5, message="Can't receive air quality data"),
    ResultStatus.FAILED_TO_GET_COMBINED_WEATHER_DATA: StatusInfo(
        code=6, message="Can't receive combined weather and air quality data"
    ),
    ResultStatus.CITY_NAME_IS_EMPTY: StatusInfo(code=7, message="City name is empty or white space"),
})


def status_info(status: ResultStatus) -> StatusInfo:
    """Look up the wire representation for a status."""
    return STATUS_INFO[status]
