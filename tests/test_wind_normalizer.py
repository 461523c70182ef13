"""Tests for wind parsing and classification."""

from __future__ import annotations

import math

import pytest

from features.wind.models.wind_types import WindConditionsEnum, WindReading
from features.wind.services.wind_normalizer import classify_wind, parse_wind


def _reading(speed: float) -> WindReading:
    return WindReading(time="2024-01-01 10:00", speed=speed, direction=180, direction_label="S", gust=speed + 2)


class TestParseWind:
    """Latest wind sample from a CO-OPS series."""

    def test_absent_series(self) -> None:
        assert parse_wind(None) is None

    def test_empty_series(self) -> None:
        assert parse_wind([]) is None

    def test_uses_last_sample(self) -> None:
        series = [
            {"t": "2024-01-01 10:00", "s": "7.58", "d": "280.00", "dr": "W", "g": "9.91", "f": "0,0"},
            {"t": "2024-01-01 10:06", "s": "12.05", "d": "292.00", "dr": "WNW", "g": "15.16", "f": "0,0"},
        ]
        wind = parse_wind(series)
        assert wind is not None
        assert wind.time == "2024-01-01 10:06"
        assert wind.speed == 12.05
        assert wind.direction == 292
        assert isinstance(wind.direction, int)
        assert wind.direction_label == "WNW"
        assert wind.gust == 15.16

    def test_malformed_numbers_degrade(self) -> None:
        wind = parse_wind([{"t": "2024-01-01 10:00", "s": "", "d": "", "dr": "", "g": "x"}])
        assert wind is not None
        assert math.isnan(wind.speed)
        assert math.isnan(wind.gust)
        assert wind.direction is None

    def test_serializes_camel_case_label(self) -> None:
        wind = parse_wind([{"t": "2024-01-01 10:00", "s": "5", "d": "90", "dr": "E", "g": "6"}])
        assert wind is not None
        dumped = wind.model_dump(by_alias=True)
        assert dumped["directionLabel"] == "E"
        assert dumped["direction"] == 90


class TestClassifyWind:
    """Wind conditions thresholds."""

    @pytest.mark.parametrize(
        ("speed", "expected"),
        [
            (16, WindConditionsEnum.WINDY),
            (15.1, WindConditionsEnum.WINDY),
            (15, WindConditionsEnum.MODERATE),
            (9, WindConditionsEnum.MODERATE),
            (8, WindConditionsEnum.CALM),
            (3, WindConditionsEnum.CALM),
            (0, WindConditionsEnum.CALM),
        ],
    )
    def test_thresholds(self, speed: float, expected: WindConditionsEnum) -> None:
        assert classify_wind(_reading(speed)) == expected

    def test_absent_reading_is_unknown(self) -> None:
        assert classify_wind(None) == WindConditionsEnum.UNKNOWN

    def test_nan_speed_is_calm(self) -> None:
        assert classify_wind(_reading(math.nan)) == WindConditionsEnum.CALM

    def test_values_are_strings(self) -> None:
        assert classify_wind(_reading(16)).value == "windy"
