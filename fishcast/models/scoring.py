"""Spot scoring result models."""

from dataclasses import dataclass

from fishcast.models.common import Rating, Species


@dataclass(frozen=True)
class ThermalProfile:
    min_f: float
    optimal_f: float
    max_f: float


@dataclass(frozen=True)
class SpotScores:
    wind: float
    pressure: float
    tides: float
    temperature: float
    # Only populated by the lagoon model
    wind_direction: float | None = None
    cold_front: float | None = None
    precipitation: float | None = None

    def as_dict(self) -> dict[str, float]:
        return {k: v for k, v in vars(self).items() if v is not None}

    def total(self) -> float:
        return sum(self.as_dict().values())


@dataclass(frozen=True)
class SpotResult:
    spot_id: str
    species: Species
    score: int  # 0-100
    rating: Rating
    color: str
    scores: SpotScores
    best_time: str
