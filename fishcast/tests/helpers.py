"""Test helpers for building raw feed payloads."""

import json
from pathlib import Path

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def make_weather_response(days: list[dict]) -> dict:
    """Build a minimal Open-Meteo response; each day needs 24 `pressures`."""
    hourly: list[float | None] = []
    for d in days:
        hourly.extend(d["pressures"])
    return {
        "daily": {
            "time": [d["date"] for d in days],
            "temperature_2m_max": [d.get("temp_max", 85) for d in days],
            "temperature_2m_min": [d.get("temp_min", 70) for d in days],
            "precipitation_sum": [d.get("precipitation", 0) for d in days],
            "wind_speed_10m_max": [d.get("wind_speed", 8) for d in days],
            "wind_direction_10m_dominant": [d.get("wind_direction", 90) for d in days],
            "weather_code": [d.get("code", 0) for d in days],
        },
        "hourly": {"surface_pressure": hourly},
    }


def pressures(morning: float | None, evening: float | None, fill: float = 1013) -> list[float | None]:
    """24 hourly samples with the given 6 AM and 6 PM values."""
    arr: list[float | None] = [fill] * 24
    arr[6] = morning
    arr[18] = evening
    return arr
