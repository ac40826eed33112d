"""Tests for forecast and tide normalization."""

from fishcast.ingest.normalizer import normalize_forecast, normalize_tides
from fishcast.models.common import PressureTrend, TideType
from fishcast.models.conditions import TideEvent
from fishcast.tests.helpers import load_fixture, make_weather_response, pressures


def _day(**kwargs) -> dict:
    d = {"date": "2024-06-15", "pressures": [1013] * 24}
    d.update(kwargs)
    return d


class TestNormalizeForecast:
    def test_fixture_payload(self):
        days = normalize_forecast(load_fixture("open_meteo_forecast.json"))
        assert [d.date for d in days] == ["2026-10-17", "2026-10-18"]

        first = days[0]
        assert first.temp_max == 84.2
        assert first.temp_min == 71.5
        assert first.precipitation == 0.02
        assert first.wind_speed == 8.4
        assert first.wind_direction == 112
        assert first.weather_code == 2
        assert first.pressure == 1016
        assert first.pressure_trend == PressureTrend.RISING

    def test_nulls_excluded_and_missing_morning_uses_average(self):
        second = normalize_forecast(load_fixture("open_meteo_forecast.json"))[1]
        # 11 x 1010 + 1008 over 12 samples = 1009.83; 6 AM is null
        assert second.pressure == 1010
        assert second.pressure_trend == PressureTrend.FALLING
        assert second.precipitation == 0

    def test_average_rounds_to_nearest(self):
        raw = make_weather_response([_day(pressures=[1017.6] * 24)])
        day = normalize_forecast(raw)[0]
        assert day.pressure == 1018
        assert day.pressure_trend == PressureTrend.STABLE

    def test_half_rounds_up(self):
        raw = make_weather_response([_day(pressures=[1012.5] * 24)])
        assert normalize_forecast(raw)[0].pressure == 1013

    def test_all_null_pressure_defaults(self):
        raw = make_weather_response([_day(pressures=[None] * 24)])
        day = normalize_forecast(raw)[0]
        assert day.pressure == 1013
        assert day.pressure_trend == PressureTrend.STABLE

    def test_trend_rising(self):
        raw = make_weather_response([_day(pressures=pressures(1010, 1012))])
        assert normalize_forecast(raw)[0].pressure_trend == PressureTrend.RISING

    def test_trend_falling(self):
        raw = make_weather_response([_day(pressures=pressures(1012, 1010))])
        assert normalize_forecast(raw)[0].pressure_trend == PressureTrend.FALLING

    def test_trend_threshold_is_exclusive(self):
        raw = make_weather_response([
            _day(date="2024-06-15", pressures=pressures(1010, 1011.5)),
            _day(date="2024-06-16", pressures=pressures(1011.5, 1010)),
        ])
        days = normalize_forecast(raw)
        assert days[0].pressure_trend == PressureTrend.STABLE
        assert days[1].pressure_trend == PressureTrend.STABLE

    def test_missing_evening_uses_average(self):
        # evening falls back to the ~1012.9 day average, 2.9 above the morning
        raw = make_weather_response([_day(pressures=pressures(1010, None))])
        assert normalize_forecast(raw)[0].pressure_trend == PressureTrend.RISING

    def test_windows_are_per_day(self):
        raw = make_weather_response([
            _day(date="2024-06-15", pressures=[1000] * 24),
            _day(date="2024-06-16", pressures=[1030] * 24),
        ])
        days = normalize_forecast(raw)
        assert [d.pressure for d in days] == [1000, 1030]

    def test_null_precipitation_becomes_zero(self):
        raw = make_weather_response([_day(precipitation=None)])
        assert normalize_forecast(raw)[0].precipitation == 0

    def test_idempotent(self):
        raw = load_fixture("open_meteo_forecast.json")
        assert normalize_forecast(raw) == normalize_forecast(raw)


class TestNormalizeTides:
    def test_parses_example(self):
        tides = normalize_tides([{"t": "2024-06-15 06:30", "v": "1.2", "type": "H"}])
        assert tides == {
            "2024-06-15": [TideEvent(hour=6, minute=30, height=1.2, type=TideType.HIGH)]
        }

    def test_groups_by_date_in_source_order(self):
        tides = normalize_tides(load_fixture("noaa_hilo.json")["predictions"])
        assert list(tides) == ["2026-10-17", "2026-10-18"]
        assert [(t.hour, t.minute) for t in tides["2026-10-17"]] == [(5, 42), (11, 58), (18, 7)]
        assert len(tides["2026-10-18"]) == 4
        assert tides["2026-10-18"][0].hour == 0

    def test_unsorted_input_order_preserved(self):
        tides = normalize_tides([
            {"t": "2024-06-15 18:00", "v": "0.9", "type": "H"},
            {"t": "2024-06-15 06:00", "v": "1.1", "type": "H"},
        ])
        assert [t.hour for t in tides["2024-06-15"]] == [18, 6]

    def test_negative_height_and_low_type(self):
        tides = normalize_tides([{"t": "2024-06-15 23:59", "v": "-0.215", "type": "L"}])
        event = tides["2024-06-15"][0]
        assert event.height == -0.215
        assert event.type == TideType.LOW
        assert (event.hour, event.minute) == (23, 59)

    def test_midnight_stays_on_its_date(self):
        tides = normalize_tides([{"t": "2024-06-16 00:05", "v": "0.1", "type": "L"}])
        assert list(tides) == ["2024-06-16"]
        assert tides["2024-06-16"][0].hour == 0

    def test_empty(self):
        assert normalize_tides([]) == {}

    def test_idempotent(self):
        predictions = load_fixture("noaa_hilo.json")["predictions"]
        assert normalize_tides(predictions) == normalize_tides(predictions)
