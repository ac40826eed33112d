"""Normalized weather and tide data models."""

from dataclasses import dataclass, field

from fishcast.models.common import PressureTrend, TideType


@dataclass(frozen=True)
class TideEvent:
    hour: int  # 0-23, station local time
    minute: int
    height: float  # feet relative to MLLW, may be negative
    type: TideType


# "YYYY-MM-DD" -> events in source order
TideSchedule = dict[str, list[TideEvent]]


@dataclass(frozen=True)
class DayRecord:
    date: str  # YYYY-MM-DD
    temp_max: float
    temp_min: float
    precipitation: float
    wind_speed: float
    wind_direction: float
    weather_code: int
    pressure: int
    pressure_trend: PressureTrend


@dataclass(frozen=True)
class DayConditions:
    wind_speed: float
    wind_direction: float
    pressure: int
    pressure_trend: PressureTrend
    temp_max: float
    temp_min: float
    precipitation: float
    weather_code: int
    tides: list[TideEvent] = field(default_factory=list)


@dataclass(frozen=True)
class FetchResult:
    days: list[DayRecord]
    tides: TideSchedule
    error: str | None = None


@dataclass(frozen=True)
class WeatherInfo:
    icon: str
    desc: str
