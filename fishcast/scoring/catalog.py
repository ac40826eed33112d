"""Expand the spot catalog across a species filter and score every pair."""

import logging

from fishcast.config.schema import SpotConfig
from fishcast.models.common import ALL_SPECIES, ScoringModel, SpeciesFilter
from fishcast.models.conditions import DayConditions, DayRecord, FetchResult, TideEvent
from fishcast.models.scoring import SpotResult
from fishcast.scoring.spot_rater import rate_spot

logger = logging.getLogger(__name__)


def build_conditions(day: DayRecord, tides: list[TideEvent]) -> DayConditions:
    """Merge a forecast day with that date's hi/lo tide events."""
    return DayConditions(
        wind_speed=day.wind_speed,
        wind_direction=day.wind_direction,
        pressure=day.pressure,
        pressure_trend=day.pressure_trend,
        temp_max=day.temp_max,
        temp_min=day.temp_min,
        precipitation=day.precipitation,
        weather_code=day.weather_code,
        tides=list(tides),
    )


def conditions_for_day(result: FetchResult, target_date: str | None = None) -> DayConditions | None:
    """Build conditions for `target_date` (default: first forecast day).

    Returns None if the date is not in the forecast. A date without tide
    events gets an empty tide list.
    """
    if not result.days:
        return None
    if target_date is None:
        day = result.days[0]
    else:
        day = next((d for d in result.days if d.date == target_date), None)
        if day is None:
            logger.warning("No forecast day for %s", target_date)
            return None
    return build_conditions(day, result.tides.get(day.date, []))


def score_catalog(
    spots: list[SpotConfig],
    conditions: DayConditions,
    species_filter: SpeciesFilter,
    model: ScoringModel = ScoringModel.LAGOON,
) -> list[SpotResult]:
    """Score every (spot, species) combination the filter selects.

    With "all", each spot is scored once per species it holds, so a spot can
    appear several times. With a specific species, each spot is scored at
    most once and spots without that species are left out.
    """
    results: list[SpotResult] = []
    for spot in spots:
        wanted = spot.species if species_filter == ALL_SPECIES else [species_filter]
        for species in wanted:
            result = rate_spot(spot, conditions, species, model)
            if result is not None:
                results.append(result)
    return results
