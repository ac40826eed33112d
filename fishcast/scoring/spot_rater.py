"""Compose sub-scores into a rated result for one (spot, species) pair."""

from fishcast.config.schema import SpotConfig
from fishcast.models.common import (
    ALL_SPECIES,
    Rating,
    ScoringModel,
    Species,
    SpeciesFilter,
    TideType,
    round_half_up,
)
from fishcast.models.conditions import DayConditions, TideEvent
from fishcast.models.scoring import SpotResult, SpotScores
from fishcast.reporting.formatters import fmt_hour
from fishcast.scoring.sub_scores import (
    is_dawn,
    is_dusk,
    preferred_tide_type,
    score_cold_front,
    score_precipitation,
    score_pressure,
    score_temperature,
    score_tides,
    score_water_movement,
    score_wind,
    score_wind_direction,
)

RATING_COLORS: dict[Rating, str] = {
    Rating.EXCELLENT: "#00c851",
    Rating.GOOD: "#ffc107",
    Rating.FAIR: "#ff7a00",
    Rating.POOR: "#f44336",
}

GENERIC_BEST_TIME = "Dawn and dusk periods"

DAILY_TARGET_TEMP_F = 78


def rate_spot(
    spot: SpotConfig,
    conditions: DayConditions,
    species_filter: SpeciesFilter,
    model: ScoringModel = ScoringModel.LAGOON,
) -> SpotResult | None:
    """Score a spot against one day's conditions.

    Returns None when `species_filter` names a species the spot does not
    hold, meaning no marker should be drawn. "all" never excludes a spot; the
    spot's first listed species is then used for temperature scoring.
    """
    if species_filter != ALL_SPECIES and species_filter not in spot.species:
        return None

    species = Species(species_filter) if species_filter != ALL_SPECIES else spot.species[0]

    scores = _score(spot, conditions, species, model)
    total = min(100, scores.total())
    rating = get_rating(total)

    return SpotResult(
        spot_id=spot.id,
        species=species,
        score=round_half_up(total),
        rating=rating,
        color=get_rating_color(rating),
        scores=scores,
        best_time=get_best_time(conditions.tides, spot),
    )


def _score(
    spot: SpotConfig, conditions: DayConditions, species: Species, model: ScoringModel
) -> SpotScores:
    wind = score_wind(conditions.wind_speed)
    pressure = score_pressure(conditions.pressure, conditions.pressure_trend)
    temperature = score_temperature(conditions.temp_max, species)

    if model == ScoringModel.TIDAL:
        return SpotScores(
            wind=wind,
            pressure=pressure,
            tides=score_tides(conditions.tides, spot.tide_preference),
            temperature=temperature,
        )

    return SpotScores(
        wind=wind,
        pressure=pressure,
        tides=score_water_movement(conditions.tides, conditions),
        temperature=temperature,
        wind_direction=score_wind_direction(conditions.wind_direction),
        cold_front=score_cold_front(conditions.pressure_trend, conditions.wind_direction),
        precipitation=score_precipitation(conditions.precipitation),
    )


def get_daily_rating(conditions: DayConditions) -> Rating:
    """Species-agnostic rating for a whole day.

    Temperature is approximated by distance from a 78°F high instead of a
    species band.
    """
    total = (
        score_wind(conditions.wind_speed)
        + score_pressure(conditions.pressure, conditions.pressure_trend)
        + max(5, 15 - abs(conditions.temp_max - DAILY_TARGET_TEMP_F) * 0.4)
        + score_water_movement(conditions.tides, conditions)
        + score_wind_direction(conditions.wind_direction)
        + score_cold_front(conditions.pressure_trend, conditions.wind_direction)
        + score_precipitation(conditions.precipitation)
    )
    return get_rating(total)


def get_rating(score: float) -> Rating:
    if score >= 78:
        return Rating.EXCELLENT
    if score >= 57:
        return Rating.GOOD
    if score >= 37:
        return Rating.FAIR
    return Rating.POOR


def get_rating_color(rating: Rating) -> str:
    return RATING_COLORS[rating]


def get_best_time(tides: list[TideEvent], spot: SpotConfig) -> str:
    """Suggest a fishing window.

    Priority: the first preferred-type tide at dawn (5-9) or dusk (16-20),
    then the first preferred-type tide at any hour, then the generic
    "Dawn and dusk periods".
    """
    if not tides:
        return GENERIC_BEST_TIME

    wanted = preferred_tide_type(spot.tide_preference)
    preferred = [t for t in tides if t.type == wanted]

    for t in preferred:
        if is_dawn(t.hour):
            return f"Dawn tide (~{fmt_hour(t.hour)})"
        if is_dusk(t.hour):
            return f"Dusk tide (~{fmt_hour(t.hour)})"

    if preferred:
        first = preferred[0]
        label = "high" if first.type == TideType.HIGH else "low"
        return f"Around {fmt_hour(first.hour)} ({label} tide)"

    return GENERIC_BEST_TIME
