"""Open-Meteo forecast API client (daily summary + hourly pressure)."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
DEFAULT_USER_AGENT = "fishcast/0.1.0"

DAILY_FIELDS = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
    "wind_direction_10m_dominant",
    "weather_code",
]
HOURLY_PRESSURE_FIELD = "surface_pressure"


class FeedError(Exception):
    """Raised when an upstream feed answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout

    async def get_forecast(
        self, latitude: float, longitude: float, days: int, timezone: str
    ) -> dict:
        """Fetch a daily forecast in °F, mph and inches for `days` days.

        One request returns the daily arrays (length `days`) plus the hourly
        surface pressure series (length 24 * `days`).
        """
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "timezone": timezone,
            "forecast_days": str(days),
            "wind_speed_unit": "mph",
            "temperature_unit": "fahrenheit",
            "precipitation_unit": "inch",
            "daily": ",".join(DAILY_FIELDS),
            "hourly": HOURLY_PRESSURE_FIELD,
        }
        headers = {"User-Agent": self.user_agent}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
        if not resp.is_success:
            logger.error("Open-Meteo %s returned %d", url, resp.status_code)
            raise FeedError(f"Weather API returned {resp.status_code}", resp.status_code)
        return resp.json()
