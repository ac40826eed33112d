"""Synthetic weather and tide data used when the live feeds are unavailable."""

import math
from datetime import date, timedelta

from fishcast.models.common import PressureTrend, TideType
from fishcast.models.conditions import DayRecord, TideEvent, TideSchedule

# Mixed semidiurnal pattern: the first high drifts ~50 minutes later each day
BASE_HIGH_HOUR = 6.0
DAILY_DRIFT_HOURS = 0.83

# (offset from first high in hours, minute, height ft, type)
_TIDE_TEMPLATE = [
    (0, 0, 1.1, TideType.HIGH),
    (6, 20, -0.1, TideType.LOW),
    (12, 45, 0.9, TideType.HIGH),
    (18, 55, 0.0, TideType.LOW),
]


def fallback_days(n: int, start: date | None = None) -> list[DayRecord]:
    """Placeholder forecast: clear sky, light east wind, stable pressure."""
    start = start or date.today()
    return [
        DayRecord(
            date=(start + timedelta(days=i)).isoformat(),
            temp_max=78,
            temp_min=65,
            precipitation=0,
            wind_speed=9,
            wind_direction=90,
            weather_code=1,
            pressure=1016,
            pressure_trend=PressureTrend.STABLE,
        )
        for i in range(n)
    ]


def fallback_tides(n: int, start: date | None = None) -> TideSchedule:
    """Four hi/lo events per day, roughly six hours apart.

    Events whose hour lands outside [0, 24) are dropped, so a date may carry
    fewer than four events.
    """
    start = start or date.today()
    tides: TideSchedule = {}
    for d in range(n):
        shift = (d * DAILY_DRIFT_HOURS) % 24
        h0 = (BASE_HIGH_HOUR + shift) % 24

        events = []
        for offset, minute, height, tide_type in _TIDE_TEMPLATE:
            hour = math.floor((h0 + offset) % 24)
            if 0 <= hour < 24:
                events.append(TideEvent(hour=hour, minute=minute, height=height, type=tide_type))
        tides[(start + timedelta(days=d)).isoformat()] = events
    return tides
