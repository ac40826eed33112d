"""NOAA CO-OPS tide predictions client (hi/lo events only)."""

import logging
from datetime import date

import httpx

from fishcast.ingest.open_meteo_client import DEFAULT_USER_AGENT, FeedError

logger = logging.getLogger(__name__)

NOAA_TIDES_BASE_URL = "https://api.tidesandcurrents.noaa.gov"


class NoaaTidesClient:
    def __init__(
        self,
        base_url: str = NOAA_TIDES_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        datum: str = "MLLW",
        application: str = "fishcast",
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.datum = datum
        self.application = application

    async def get_predictions(self, station: str, begin: date, end: date) -> dict:
        """Fetch hi/lo predictions for a station in local standard time.

        The decoded body is returned as-is. NOAA reports problems such as an
        unknown station with a 200 response and an "error" object instead of
        "predictions"; interpreting that is left to the caller.
        """
        url = f"{self.base_url}/api/prod/datagetter"
        params = {
            "begin_date": begin.strftime("%Y%m%d"),
            "end_date": end.strftime("%Y%m%d"),
            "station": station,
            "product": "predictions",
            "datum": self.datum,
            "time_zone": "lst",
            "interval": "hilo",
            "units": "english",
            "application": self.application,
            "format": "json",
        }
        headers = {"User-Agent": self.user_agent}

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
        if not resp.is_success:
            logger.error("NOAA %s returned %d", url, resp.status_code)
            raise FeedError(f"NOAA API returned {resp.status_code}", resp.status_code)
        return resp.json()
