"""Tests for the HTTP entrypoints."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from features.common.exceptions.coops_exceptions import CoopsRequestError, CoopsResponseError
from features.conditions.services.condition_service import ConditionService
from features.stations.services.station_service import StationService
from features.tides.services.tide_service import TideService
from main import app


@pytest.fixture
def api(
    client: AsyncMock,
    tide_service: TideService,
    station_service: StationService,
    condition_service: ConditionService,
) -> Iterator[TestClient]:
    """TestClient wired to services backed by the mocked CO-OPS client.

    Used without a ``with`` block so the lifespan (and its real client) never runs.
    """
    app.state.tide_service = tide_service
    app.state.station_service = station_service
    app.state.condition_service = condition_service
    yield TestClient(app)
    for name in ("tide_service", "station_service", "condition_service"):
        delattr(app.state, name)


class TestHealthAndManifest:
    def test_health(self, api: TestClient) -> None:
        resp = api.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"

    def test_manifest_lists_priced_entrypoints(self, api: TestClient) -> None:
        resp = api.get("/entrypoints")
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "tide-tracker"
        prices = {e["key"]: e["price"] for e in body["entrypoints"]}
        assert prices == {
            "overview": 0,
            "tides": 1000,
            "search": 2000,
            "forecast": 2000,
            "conditions": 3000,
            "report": 5000,
        }


class TestTideRoutes:
    def test_overview(self, api: TestClient) -> None:
        resp = api.get("/overview")
        assert resp.status_code == 200
        body = resp.json()
        assert body["dataSource"] == "NOAA Tides & Currents (live)"
        assert body["availableStations"] == 3379
        assert "hint" in body
        assert len(body["tides"]) == 4

    def test_today_tides(self, api: TestClient) -> None:
        resp = api.get("/tides/9414290")
        assert resp.status_code == 200
        body = resp.json()
        assert body["stationId"] == "9414290"
        assert body["units"] == "feet (MLLW datum)"
        assert body["tides"][0] == {"time": "2024-01-01 05:00", "height": 5.123, "type": "high"}
        assert body["tides"][1]["type"] == "low"

    def test_today_tides_error_payload(self, api: TestClient, client: AsyncMock) -> None:
        client.get_predictions.side_effect = CoopsResponseError("Wrong Station ID: bogus")
        resp = api.get("/tides/bogus")
        assert resp.status_code == 200
        assert resp.json() == {"error": "Wrong Station ID: bogus", "stationId": "bogus"}

    def test_forecast(self, api: TestClient) -> None:
        resp = api.get("/tides/9414290/forecast", params={"days": 2})
        assert resp.status_code == 200
        body = resp.json()
        assert body["days"] == 2
        assert list(body["forecast"]) == ["2024-01-01"]
        assert len(body["forecast"]["2024-01-01"]) == 4

    def test_forecast_default_days(self, api: TestClient) -> None:
        resp = api.get("/tides/9414290/forecast")
        assert resp.json()["days"] == 3

    @pytest.mark.parametrize("days", [0, 8])
    def test_forecast_days_out_of_range(self, api: TestClient, days: int) -> None:
        resp = api.get("/tides/9414290/forecast", params={"days": days})
        assert resp.status_code == 422


class TestStationRoutes:
    def test_search(self, api: TestClient, client: AsyncMock) -> None:
        client.get_stations.return_value = [
            {"id": "1612340", "name": "Honolulu", "lat": 21.3, "lng": -157.9, "state": "HI"},
            {"id": "9414290", "name": "San Francisco", "lat": 37.8, "lng": -122.5, "state": "CA"},
        ]
        resp = api.get("/stations/search", params={"state": "hi"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["state"] == "HI"
        assert body["count"] == 1
        assert body["stations"] == [
            {"id": "1612340", "name": "Honolulu", "lat": 21.3, "lng": -157.9, "state": "HI"}
        ]

    @pytest.mark.parametrize("state", ["C", "CAL"])
    def test_state_must_be_two_letters(self, api: TestClient, state: str) -> None:
        resp = api.get("/stations/search", params={"state": state})
        assert resp.status_code == 422

    def test_state_required(self, api: TestClient) -> None:
        assert api.get("/stations/search").status_code == 422

    def test_limit_must_be_positive(self, api: TestClient) -> None:
        resp = api.get("/stations/search", params={"state": "CA", "limit": 0})
        assert resp.status_code == 422

    def test_search_failure(self, api: TestClient, client: AsyncMock) -> None:
        client.get_stations.side_effect = CoopsRequestError("API error: 500")
        resp = api.get("/stations/search", params={"state": "ca"})
        assert resp.status_code == 200
        assert resp.json() == {"error": "API error: 500", "state": "CA"}


class TestConditionRoutes:
    def test_conditions(self, api: TestClient) -> None:
        resp = api.get("/conditions/9414290")
        assert resp.status_code == 200
        body = resp.json()
        assert body["station"]["name"] == "San Francisco"
        assert body["wind"]["directionLabel"] == "WNW"
        assert body["units"] == {"tide": "feet (MLLW datum)", "wind": "knots"}
        assert "fetchedAt" in body

    def test_conditions_without_wind(self, api: TestClient, client: AsyncMock) -> None:
        client.get_wind.return_value = []
        resp = api.get("/conditions/9414290")
        assert resp.status_code == 200
        assert resp.json()["wind"] is None

    def test_conditions_tide_failure(self, api: TestClient, client: AsyncMock) -> None:
        client.get_predictions.side_effect = CoopsRequestError("API error: 503")
        resp = api.get("/conditions/9414290")
        assert resp.status_code == 200
        assert resp.json() == {"error": "API error: 503", "stationId": "9414290"}

    def test_report(self, api: TestClient) -> None:
        resp = api.get("/conditions/9414290/report")
        assert resp.status_code == 200
        body = resp.json()
        assert body["station"]["tideType"] == "Mixed"
        assert body["summary"]["highTidesPerDay"] == 2
        assert body["summary"]["windConditions"] == "windy"
        assert body["dataSource"] == "NOAA Tides & Currents"
        assert "fiveDayForecast" in body
        assert "nextTide" in body["today"]


class TestStationWireShape:
    """Station metadata CO-OPS didn't report is omitted, not sent as null."""

    def test_conditions_station_has_no_tide_type(self, api: TestClient) -> None:
        station = api.get("/conditions/9414290").json()["station"]
        assert "tideType" not in station
        assert station["timezone"] == "PST"

    def test_placeholder_station_omits_unknown_fields(self, api: TestClient, client: AsyncMock) -> None:
        client.get_station.side_effect = CoopsRequestError("API error: 500")
        body = api.get("/conditions/9414290").json()
        assert body["station"] == {"id": "9414290", "name": "Unknown"}
        assert "wind" in body

    def test_report_keeps_tide_type(self, api: TestClient) -> None:
        station = api.get("/conditions/9414290/report").json()["station"]
        assert station["tideType"] == "Mixed"

    def test_search_tolerates_incomplete_records(self, api: TestClient, client: AsyncMock) -> None:
        client.get_stations.return_value = [
            {"name": "No Id", "state": "CA"},
            {"id": "9414290", "name": "San Francisco", "state": "CA"},
        ]
        resp = api.get("/stations/search", params={"state": "CA"})
        assert resp.status_code == 200
        assert resp.json()["stations"] == [{"id": "9414290", "name": "San Francisco", "state": "CA"}]
