"""Display helpers and output formatters for forecasts and spot reports."""

import json
from dataclasses import asdict

from fishcast.models.common import round_half_up
from fishcast.models.conditions import DayRecord, FetchResult, TideEvent, WeatherInfo
from fishcast.models.scoring import SpotResult

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# (highest code in range, icon, description), checked in order
_WMO_RANGES = [
    (0, "☀️", "Clear"),
    (2, "⛅", "Partly Cloudy"),
    (3, "☁️", "Overcast"),
    (48, "🌫️", "Foggy"),
    (57, "🌦️", "Drizzle"),
    (67, "🌧️", "Rain"),
    (77, "❄️", "Snow"),
    (82, "🌦️", "Showers"),
    (99, "⛈️", "Thunderstorm"),
]


def deg_to_compass(deg: float) -> str:
    """Meteorological degrees (0 = N, 90 = E) to a 16-point compass label."""
    return COMPASS_POINTS[round_half_up(deg / 22.5) % 16]


def format_tide_time(event: TideEvent) -> str:
    """Tide event time as a 12-hour clock string, e.g. '6:30 AM'."""
    return f"{event.hour % 12 or 12}:{event.minute:02d} {'AM' if event.hour < 12 else 'PM'}"


def fmt_hour(hour: int) -> str:
    """Whole hour as a 12-hour clock string, e.g. '6:00 PM'."""
    return f"{hour % 12 or 12}:00 {'AM' if hour < 12 else 'PM'}"


def weather_info(code: int) -> WeatherInfo:
    """Icon and short description for a WMO weather interpretation code."""
    for upper, icon, desc in _WMO_RANGES:
        if code <= upper:
            return WeatherInfo(icon=icon, desc=desc)
    return WeatherInfo(icon="🌤️", desc="Variable")


def format_day_text(day: DayRecord, tides: list[TideEvent]) -> str:
    info = weather_info(day.weather_code)
    lines = [
        f"{day.date}  {info.icon} {info.desc}  "
        f"{day.temp_max:.0f}°/{day.temp_min:.0f}°F  "
        f"Wind {day.wind_speed:.0f} mph {deg_to_compass(day.wind_direction)}  "
        f"{day.pressure} hPa ({day.pressure_trend})  "
        f"Rain {day.precipitation:.2f} in",
    ]
    if tides:
        lines.append(
            "  Tides: " + ", ".join(
                f"{t.type} {format_tide_time(t)} ({t.height:+.1f} ft)" for t in tides
            )
        )
    else:
        lines.append("  Tides: none")
    return "\n".join(lines)


def format_forecast_text(result: FetchResult) -> str:
    lines = [f"=== Forecast ({len(result.days)} days) ==="]
    if result.error:
        lines.append(f"Live data unavailable, showing fallback: {result.error}")
    for day in result.days:
        lines.append(format_day_text(day, result.tides.get(day.date, [])))
    return "\n".join(lines)


def format_catalog_text(
    date: str, species_filter: str, results: list[SpotResult], spot_names: dict[str, str]
) -> str:
    """Plain text report, best score first."""
    lines = [f"=== Fishing Report {date} ({species_filter}) ==="]
    if not results:
        lines.append("No spots match this species.")
    for r in sorted(results, key=lambda r: r.score, reverse=True):
        breakdown = " ".join(f"{k}={v:g}" for k, v in r.scores.as_dict().items())
        lines.append(
            f"{r.score:3d} {r.rating:<9} {spot_names.get(r.spot_id, r.spot_id)} "
            f"[{r.species.title()}] - {r.best_time}"
        )
        lines.append(f"    {breakdown}")
    return "\n".join(lines)


def format_catalog_json(date: str, species_filter: str, results: list[SpotResult]) -> str:
    """JSON report for programmatic consumption."""
    data = {
        "date": date,
        "species": species_filter,
        "results": [
            {**asdict(r), "scores": r.scores.as_dict()}
            for r in sorted(results, key=lambda r: r.score, reverse=True)
        ],
    }
    return json.dumps(data, indent=2)
