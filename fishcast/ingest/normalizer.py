"""Reshape raw Open-Meteo and NOAA payloads into canonical records."""

import logging

from fishcast.models.common import PressureTrend, TideType, round_half_up
from fishcast.models.conditions import DayRecord, TideEvent, TideSchedule

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24
DEFAULT_PRESSURE_HPA = 1013
MORNING_HOUR = 6
EVENING_HOUR = 18
TREND_THRESHOLD_HPA = 1.5


def normalize_forecast(raw: dict) -> list[DayRecord]:
    """Transform an Open-Meteo response into one DayRecord per forecast date.

    Pressure is the mean of the day's 24 hourly samples with nulls excluded.
    The trend compares the 6 AM sample to the 6 PM sample: a change above
    1.5 hPa is rising, below -1.5 hPa falling, anything else stable.
    """
    daily = raw["daily"]
    hourly_pressure = raw["hourly"]["surface_pressure"]

    days: list[DayRecord] = []
    for i, day in enumerate(daily["time"]):
        window = hourly_pressure[i * HOURS_PER_DAY:(i + 1) * HOURS_PER_DAY]
        samples = [p for p in window if p is not None]
        avg = sum(samples) / len(samples) if samples else DEFAULT_PRESSURE_HPA

        morning = _sample_or(window, MORNING_HOUR, avg)
        evening = _sample_or(window, EVENING_HOUR, avg)

        precip = daily["precipitation_sum"][i]
        days.append(
            DayRecord(
                date=day,
                temp_max=daily["temperature_2m_max"][i],
                temp_min=daily["temperature_2m_min"][i],
                precipitation=precip if precip is not None else 0,
                wind_speed=daily["wind_speed_10m_max"][i],
                wind_direction=daily["wind_direction_10m_dominant"][i],
                weather_code=daily["weather_code"][i],
                pressure=round_half_up(avg),
                pressure_trend=_pressure_trend(evening - morning),
            )
        )

    logger.debug("Normalized %d forecast days", len(days))
    return days


def normalize_tides(predictions: list[dict]) -> TideSchedule:
    """Group NOAA hi/lo prediction rows by date.

    Times arrive as station-local "YYYY-MM-DD HH:MM" strings and are split by
    hand so no timezone conversion can move an event to another hour or day.
    """
    by_date: TideSchedule = {}
    for p in predictions:
        stamp = p["t"]
        space = stamp.index(" ")
        date_part = stamp[:space]
        time_part = stamp[space + 1:]
        colon = time_part.index(":")

        event = TideEvent(
            hour=int(time_part[:colon]),
            minute=int(time_part[colon + 1:]),
            height=float(p["v"]),
            type=TideType(p["type"]),
        )
        by_date.setdefault(date_part, []).append(event)

    logger.debug(
        "Normalized %d tide events over %d dates", len(predictions), len(by_date)
    )
    return by_date


def _sample_or(window: list[float | None], hour: int, default: float) -> float:
    if hour < len(window) and window[hour] is not None:
        return window[hour]
    return default


def _pressure_trend(diff: float) -> PressureTrend:
    if diff > TREND_THRESHOLD_HPA:
        return PressureTrend.RISING
    if diff < -TREND_THRESHOLD_HPA:
        return PressureTrend.FALLING
    return PressureTrend.STABLE
