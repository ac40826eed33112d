"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, model_validator

from fishcast.ingest.noaa_tides_client import NOAA_TIDES_BASE_URL
from fishcast.ingest.open_meteo_client import OPEN_METEO_BASE_URL
from fishcast.models.common import ScoringModel, Species, TidePreference


class WeatherFeedConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = OPEN_METEO_BASE_URL
    latitude: float = Field(default=28.4, ge=-90.0, le=90.0)
    longitude: float = Field(default=-80.72, ge=-180.0, le=180.0)
    timezone: str = "America/New_York"
    timeout: float = Field(default=30.0, gt=0.0)


class TideFeedConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = NOAA_TIDES_BASE_URL
    station: str = "8721604"
    station_name: str = "Port Canaveral"
    datum: str = "MLLW"
    application: str = "fishcast"
    timeout: float = Field(default=30.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Open-Meteo free tier serves up to 16 days
    days: int = Field(default=7, ge=1, le=16)


class ScoringConfig(BaseModel):
    model_config = {"extra": "forbid"}

    model: ScoringModel = ScoringModel.LAGOON


class SpotConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)
    species: list[Species] = Field(min_length=1)
    description: str = ""
    features: list[str] = Field(min_length=1)
    tide_preference: TidePreference
    tips: list[str] = Field(min_length=1)

    @model_validator(mode="after")
    def _no_duplicate_species(self) -> "SpotConfig":
        if len(set(self.species)) != len(self.species):
            raise ValueError(f"Duplicate species for spot {self.id!r}")
        return self


class FishcastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    weather: WeatherFeedConfig = WeatherFeedConfig()
    tides: TideFeedConfig = TideFeedConfig()
    forecast: ForecastConfig = ForecastConfig()
    scoring: ScoringConfig = ScoringConfig()
    spots: list[SpotConfig] = []

    @model_validator(mode="after")
    def _unique_spots(self) -> "FishcastConfig":
        ids = [s.id for s in self.spots]
        names = [s.name for s in self.spots]
        if len(set(ids)) != len(ids):
            raise ValueError("Spot ids must be unique")
        if len(set(names)) != len(names):
            raise ValueError("Spot names must be unique")
        return self
