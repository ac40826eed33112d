"""Independent condition sub-scores.

Each function is pure and bounded:

    wind            0-25  lower wind = calmer water, better sight fishing
    pressure        0-25  high, rising barometer = actively feeding fish
    tides           0-30  preferred tide type, ideally at dawn or dusk
    water movement  0-20  wind and pressure driven flow in microtidal water
    temperature     0-20  species thermal comfort band
    wind direction  0-10  E/SE winds push water onto the lagoon flats
    cold front      0-10  falling pressure + northerly wind shuts down feeding
    precipitation   0-5   heavy rain muddies the water
"""

from fishcast.models.common import (
    PressureTrend,
    Species,
    TidePreference,
    TideType,
    round_half_up,
)
from fishcast.models.conditions import DayConditions, TideEvent
from fishcast.models.scoring import ThermalProfile

SPECIES_PROFILES: dict[Species, ThermalProfile] = {
    Species.TARPON: ThermalProfile(min_f=70, optimal_f=82, max_f=94),
    Species.SNOOK: ThermalProfile(min_f=58, optimal_f=75, max_f=90),
    Species.REDFISH: ThermalProfile(min_f=48, optimal_f=70, max_f=88),
    Species.BLACK_DRUM: ThermalProfile(min_f=45, optimal_f=68, max_f=85),
    Species.SPECKLED_TROUT: ThermalProfile(min_f=45, optimal_f=68, max_f=82),
}

# Inshore water runs about 3°F below the daily air high
WATER_OFFSET_F = 3

DAWN_HOURS = range(5, 10)
DUSK_HOURS = range(16, 21)

NEUTRAL_TIDE_SCORE = 14

_TREND_BONUS: dict[PressureTrend, int] = {
    PressureTrend.RISING: 4,
    PressureTrend.STABLE: 1,
    PressureTrend.FALLING: -6,
}


def preferred_tide_type(preference: TidePreference) -> TideType:
    return TideType.HIGH if preference == TidePreference.INCOMING else TideType.LOW


def is_dawn(hour: int) -> bool:
    return hour in DAWN_HOURS


def is_dusk(hour: int) -> bool:
    return hour in DUSK_HOURS


def score_wind(mph: float) -> int:
    if mph < 5:
        return 25
    if mph < 10:
        return 20
    if mph < 15:
        return 13
    if mph < 20:
        return 6
    if mph < 25:
        return 2
    return 0


def score_pressure(hpa: float, trend: PressureTrend) -> int:
    """Band score from absolute pressure plus a trend adjustment, clamped to [0, 25]."""
    if hpa >= 1023:
        base = 21
    elif hpa >= 1015:
        base = 17
    elif hpa >= 1008:
        base = 11
    elif hpa >= 1000:
        base = 6
    else:
        base = 2
    return max(0, min(25, base + _TREND_BONUS[trend]))


def score_tides(tides: list[TideEvent], preference: TidePreference) -> int:
    """Score the day's tide schedule for a spot.

    - activity (0-8): two points per event
    - preference (5 or 12): the preferred tide type occurs at all
    - prime bonus (0 or 10): the preferred type occurs at dawn or dusk

    An empty schedule scores a neutral 14.
    """
    if not tides:
        return NEUTRAL_TIDE_SCORE

    wanted = preferred_tide_type(preference)
    activity = min(8, len(tides) * 2)
    preference_score = 12 if any(t.type == wanted for t in tides) else 5
    return min(30, activity + preference_score + prime_tide_bonus(tides, preference))


def prime_tide_bonus(tides: list[TideEvent], preference: TidePreference) -> int:
    wanted = preferred_tide_type(preference)
    for t in tides:
        if t.type == wanted and (is_dawn(t.hour) or is_dusk(t.hour)):
            return 10
    return 0


def score_water_movement(tides: list[TideEvent], conditions: DayConditions) -> int:
    """Score water movement in a wind-driven, microtidal estuary.

    Hi/lo events are only a minor supplement (0-4). Any pressure change moves
    water (8, stable 2), and moderate wind of 5-18 mph drives productive
    currents (8; calmer 4, stronger 2).
    """
    tidal = min(4, len(tides))
    pressure = 2 if conditions.pressure_trend == PressureTrend.STABLE else 8

    wind = conditions.wind_speed
    if 5 <= wind <= 18:
        wind_movement = 8
    elif wind < 5:
        wind_movement = 4
    else:
        wind_movement = 2

    return min(20, tidal + pressure + wind_movement)


def score_temperature(air_temp_f: float, species: Species) -> float:
    """Score estimated water temperature against the species' thermal band.

    Inside [min, max] the score decays 0.75 per degree from optimal with a
    floor of 5. Outside it starts at 8 and drops one point per degree past
    the nearest bound.
    """
    water = air_temp_f - WATER_OFFSET_F
    p = SPECIES_PROFILES[species]

    if water < p.min_f or water > p.max_f:
        overshoot = p.min_f - water if water < p.min_f else water - p.max_f
        return max(0, 8 - overshoot)

    return max(5, round_half_up(20 - abs(water - p.optimal_f) * 0.75))


def score_wind_direction(degrees: float) -> int:
    if 90 <= degrees <= 160:
        return 10  # E to SE
    if 60 <= degrees <= 200:
        return 7  # NE to S
    if 200 <= degrees <= 250:
        return 4
    if 250 <= degrees <= 290:
        return 2
    return 0  # NW through N to NNE


def is_northerly(degrees: float) -> bool:
    return degrees > 290 or degrees < 60


def score_cold_front(trend: PressureTrend, degrees: float) -> int:
    northerly = is_northerly(degrees)
    if trend == PressureTrend.FALLING and northerly:
        return 0  # active front
    if trend == PressureTrend.RISING and northerly:
        return 4  # post-front
    if trend == PressureTrend.FALLING:
        return 6  # pre-front push
    return 10


def score_precipitation(inches: float) -> int:
    if inches < 0.10:
        return 5
    if inches < 0.25:
        return 3
    if inches < 0.50:
        return 1
    return 0
