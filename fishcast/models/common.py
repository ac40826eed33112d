"""Common enums and helpers shared across models."""

import math
from enum import StrEnum
from typing import TypeAlias


class Species(StrEnum):
    TARPON = "tarpon"
    SNOOK = "snook"
    REDFISH = "redfish"
    BLACK_DRUM = "black drum"
    SPECKLED_TROUT = "speckled trout"


ALL_SPECIES = "all"

# A specific species or "all"
SpeciesFilter: TypeAlias = Species | str


class TideType(StrEnum):
    HIGH = "H"
    LOW = "L"


class TidePreference(StrEnum):
    INCOMING = "incoming"
    OUTGOING = "outgoing"


class PressureTrend(StrEnum):
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class Rating(StrEnum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ScoringModel(StrEnum):
    TIDAL = "tidal"  # ocean-influenced water: tide schedule dominates
    LAGOON = "lagoon"  # microtidal estuary: wind and pressure move the water


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)
