"""Tests for OpenWeatherMap payload normalizers."""

import json
from datetime import date
from pathlib import Path

import pytest

from weatherdash.ingest.normalize import (
    format_forecast,
    format_weather,
    parse_cities,
    round_half_up,
)
from weatherdash.tests.helpers import FORECAST_START_TS, make_forecast_payload

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


def _load(name: str):
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(11.52, 12), (10.5, 11), (10.49, 10), (-2.5, -2), (-2.51, -3), (0.0, 0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestFormatWeather:
    def test_london_fixture(self):
        reading = format_weather(_load("owm_weather_london.json"))
        assert reading.city == "London"
        assert reading.country == "GB"
        assert reading.temperature_c == 12
        assert reading.feels_like_c == 11
        assert isinstance(reading.temperature_c, int)
        assert isinstance(reading.feels_like_c, int)
        assert reading.description == "broken clouds"
        assert reading.icon_id == "04d"
        assert reading.icon_url == "https://openweathermap.org/img/wn/04d@2x.png"
        assert reading.humidity_pct == 81
        assert reading.wind_speed_mps == 4.63
        assert reading.pressure_hpa == 1012
        assert reading.visibility_km == 10.0
        assert reading.uv_index is None

    def test_missing_main_raises(self):
        raw = _load("owm_weather_london.json")
        del raw["main"]
        with pytest.raises(KeyError):
            format_weather(raw)


class TestFormatForecast:
    def test_collapses_to_five_distinct_dates(self):
        days = format_forecast(make_forecast_payload(40))
        assert len(days) == 5
        dates = [d.date for d in days]
        assert dates == sorted(dates)
        assert len(set(dates)) == 5
        assert dates[0] == date(2026, 2, 11)
        assert dates[-1] == date(2026, 2, 15)

    def test_first_sample_per_date_wins(self):
        days = format_forecast(make_forecast_payload(40))
        # Sample 0 is 09:00 on the 11th; sample 5 is midnight on the 12th
        assert days[0].description == "sample 0"
        assert days[1].description == "sample 5"
        assert days[1].temperature_c == round_half_up(10.5 + 5 * 0.1)

    def test_fewer_dates_than_limit(self):
        days = format_forecast(make_forecast_payload(6))
        assert [d.date for d in days] == [date(2026, 2, 11), date(2026, 2, 12)]

    def test_unordered_samples_are_sorted(self):
        payload = make_forecast_payload(16)
        payload["list"].reverse()
        days = format_forecast(payload)
        assert [d.description for d in days] == ["sample 0", "sample 5", "sample 13"]

    def test_city_timezone_shifts_dates(self):
        # UTC-5: the 09:00Z sample is 04:00 local, still the 11th;
        # midnight UTC on the 12th is 19:00 local on the 11th
        payload = make_forecast_payload(8, start_ts=FORECAST_START_TS, tz_offset=-5 * 3600)
        days = format_forecast(payload)
        assert [d.date for d in days] == [date(2026, 2, 11), date(2026, 2, 12)]
        assert days[1].description == "sample 7"

    def test_empty_list(self):
        assert format_forecast({"list": []}) == []


class TestParseCities:
    def test_fixture(self):
        cities = parse_cities(_load("owm_geo_lon.json"))
        assert len(cities) == 5
        assert cities[0].name == "London"
        assert cities[0].state == "England"
        assert cities[3].state == ""
        assert cities[1].latitude == pytest.approx(42.9832406)

    def test_capped_at_five(self):
        raw = [{"name": f"City{i}", "country": "XX", "lat": i, "lon": i} for i in range(8)]
        assert len(parse_cities(raw)) == 5
