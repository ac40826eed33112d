"""Acquisition coordinator: concurrent forecast + tide fetch with fallback."""

import asyncio
import logging
from collections.abc import Callable
from datetime import date, timedelta

import httpx

from fishcast.config.schema import FishcastConfig
from fishcast.ingest.fallback import fallback_days, fallback_tides
from fishcast.ingest.noaa_tides_client import NoaaTidesClient
from fishcast.ingest.normalizer import normalize_forecast, normalize_tides
from fishcast.ingest.open_meteo_client import FeedError, OpenMeteoClient
from fishcast.models.conditions import DayRecord, FetchResult, TideSchedule

logger = logging.getLogger(__name__)

# Failures that send fetch_all down the fallback path. The builtin errors cover
# undecodable bodies and arrays of the wrong length or type from either feed.
FETCH_ERRORS = (
    httpx.HTTPError,
    FeedError,
    ValueError,
    KeyError,
    IndexError,
    TypeError,
)


class AcquisitionCoordinator:
    def __init__(
        self,
        config: FishcastConfig,
        weather_client: OpenMeteoClient | None = None,
        tide_client: NoaaTidesClient | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.config = config
        self.weather = weather_client or OpenMeteoClient(
            base_url=config.weather.base_url, timeout=config.weather.timeout
        )
        self.tides = tide_client or NoaaTidesClient(
            base_url=config.tides.base_url,
            timeout=config.tides.timeout,
            datum=config.tides.datum,
            application=config.tides.application,
        )
        self._today = today

    async def fetch_all(self) -> FetchResult:
        """Fetch the forecast and tide feeds concurrently.

        Both requests run to completion before a result is produced. If either
        one fails, both feeds are replaced by fallback data and the failure
        message is returned in `error`.
        """
        start = self._today()
        n = self.config.forecast.days

        days, tides = await asyncio.gather(
            self._fetch_days(),
            self._fetch_tides(start, n),
            return_exceptions=True,
        )
        for outcome in (days, tides):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, FETCH_ERRORS):
                    raise outcome
                message = str(outcome) or type(outcome).__name__
                logger.error("Fetch error, serving fallback data: %s", message)
                return FetchResult(
                    days=fallback_days(n, start),
                    tides=fallback_tides(n, start),
                    error=message,
                )

        return FetchResult(days=days, tides=tides, error=None)

    async def _fetch_days(self) -> list[DayRecord]:
        w = self.config.weather
        raw = await self.weather.get_forecast(
            w.latitude, w.longitude, self.config.forecast.days, w.timezone
        )
        return normalize_forecast(raw)

    async def _fetch_tides(self, start: date, n: int) -> TideSchedule:
        raw = await self.tides.get_predictions(
            self.config.tides.station, start, start + timedelta(days=n - 1)
        )
        error = raw.get("error")
        predictions = raw.get("predictions")
        if error is not None or predictions is None:
            # NOAA answered but carried no data. Only the tides are replaced
            # and the problem is not reported through FetchResult.error, unlike
            # transport failures which replace both feeds.
            logger.warning(
                "NOAA error for station %s: %s",
                self.config.tides.station,
                _noaa_error_message(error),
            )
            return fallback_tides(n, start)
        return normalize_tides(predictions)


def _noaa_error_message(error) -> str:
    # Usually {"message": ...}, but a bare string is passed through too
    if isinstance(error, dict):
        return str(error.get("message", error))
    if error:
        return str(error)
    return "no predictions in response"
