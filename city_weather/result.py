"""Tagged success/failure results returned by the lookup services.

A lookup either produces ``Ok(value)`` or ``Err(status)``. Callers branch on
``is_ok()`` (or ``isinstance``) before touching the payload, so a failed
lookup can never leak a half-populated object alongside an OK status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from city_weather.status import ResultStatus

T = TypeVar("T")
D = TypeVar("D")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful lookup carrying its payload."""
    value: T

    @property
    def status(self) -> ResultStatus:
        return ResultStatus.OK

    def is_ok(self) -> bool:
        return True

    def value_or(self, default: D) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed lookup carrying only the failure status."""
    status: ResultStatus

    def __post_init__(self) -> None:
        if self.status is ResultStatus.OK:
            raise ValueError("Err cannot carry ResultStatus.OK")

    def is_ok(self) -> bool:
        return False

    def value_or(self, default: D) -> D:
        return default


Result = Union[Ok[T], Err]
