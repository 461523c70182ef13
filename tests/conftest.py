"""Shared fixtures: a mocked CO-OPS client and services built on it."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from features.common.services.coops_client import CoopsClient
from features.conditions.services.condition_service import ConditionService
from features.stations.services.station_service import StationService
from features.tides.services.tide_service import TideService
from features.wind.services.wind_service import WindService

HILO_PREDICTIONS: list[dict[str, Any]] = [
    {"t": "2024-01-01 05:00", "v": "5.123", "type": "H"},
    {"t": "2024-01-01 11:42", "v": "-0.412", "type": "L"},
    {"t": "2024-01-01 17:30", "v": "4.870", "type": "H"},
    {"t": "2024-01-01 23:55", "v": "1.204", "type": "L"},
]

FORECAST_PREDICTIONS: list[dict[str, Any]] = [
    {"t": "2024-01-01 05:00", "v": "5.123", "type": "H"},
    {"t": "2024-01-01 17:30", "v": "4.870", "type": "H"},
    {"t": "2024-01-02 06:10", "v": "0.310", "type": "L"},
]

WIND_SERIES: list[dict[str, Any]] = [
    {"t": "2024-01-01 10:00", "s": "7.58", "d": "280.00", "dr": "W", "g": "9.91", "f": "0,0"},
    {"t": "2024-01-01 10:06", "s": "16.33", "d": "292.00", "dr": "WNW", "g": "21.19", "f": "0,0"},
]

STATION_METADATA: dict[str, Any] = {
    "id": "9414290",
    "name": "San Francisco",
    "lat": 37.806305,
    "lng": -122.46589,
    "state": "CA",
    "timezone": "PST",
    "tideType": "Mixed",
}


@pytest.fixture
def client() -> AsyncMock:
    """CoopsClient with every upstream call mocked."""
    mock = AsyncMock(spec=CoopsClient)
    mock.get_predictions.return_value = list(HILO_PREDICTIONS)
    mock.get_wind.return_value = list(WIND_SERIES)
    mock.get_station.return_value = dict(STATION_METADATA)
    mock.get_stations.return_value = []
    return mock


@pytest.fixture
def tide_service(client: AsyncMock) -> TideService:
    return TideService(client)


@pytest.fixture
def station_service(client: AsyncMock) -> StationService:
    return StationService(client)


@pytest.fixture
def wind_service(client: AsyncMock) -> WindService:
    return WindService(client)


@pytest.fixture
def condition_service(
    client: AsyncMock, station_service: StationService, wind_service: WindService
) -> ConditionService:
    return ConditionService(client=client, station_service=station_service, wind_service=wind_service)
