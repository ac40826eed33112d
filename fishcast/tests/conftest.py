"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from fishcast.config.defaults import DEFAULT_SPOTS
from fishcast.config.schema import FishcastConfig, SpotConfig
from fishcast.models.common import PressureTrend, TideType
from fishcast.models.conditions import DayConditions, TideEvent
from fishcast.tests.helpers import FIXTURE_DIR


@pytest.fixture
def default_config() -> FishcastConfig:
    """Return default FishcastConfig with the default spot catalog."""
    return FishcastConfig(spots=DEFAULT_SPOTS)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "forecast": {"days": 5},
        "scoring": {"model": "lagoon"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def incoming_spot() -> SpotConfig:
    return SpotConfig(
        id="test-incoming",
        name="Test Incoming Spot",
        lat=28.0,
        lng=-80.5,
        species=["redfish", "snook"],
        description="Test",
        features=["flats"],
        tide_preference="incoming",
        tips=["Test tip"],
    )


@pytest.fixture
def outgoing_spot(incoming_spot: SpotConfig) -> SpotConfig:
    return SpotConfig(
        **{
            **incoming_spot.model_dump(),
            "id": "test-outgoing",
            "name": "Test Outgoing Spot",
            "tide_preference": "outgoing",
            "species": ["tarpon", "snook"],
        }
    )


@pytest.fixture
def base_tides() -> list[TideEvent]:
    return [
        TideEvent(hour=6, minute=30, height=1.2, type=TideType.HIGH),  # dawn high
        TideEvent(hour=12, minute=15, height=-0.1, type=TideType.LOW),
        TideEvent(hour=18, minute=45, height=0.9, type=TideType.HIGH),  # dusk high
        TideEvent(hour=23, minute=55, height=0.0, type=TideType.LOW),
    ]


@pytest.fixture
def base_conditions(base_tides: list[TideEvent]) -> DayConditions:
    return DayConditions(
        wind_speed=8,
        wind_direction=90,
        pressure=1020,
        pressure_trend=PressureTrend.RISING,
        temp_max=80,
        temp_min=68,
        precipitation=0,
        weather_code=1,
        tides=base_tides,
    )
