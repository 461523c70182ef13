from enum import Enum
from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field

from features.common.models.station_types import FeaturedStation

class TideKind(str, Enum):
    HIGH = "high"
    LOW = "low"
    READING = "reading"

class TidePrediction(BaseModel):
    """Individual tide prediction"""
    time: str = Field(..., description="Local station time, YYYY-MM-DD HH:MM")
    height: float = Field(..., description="Height of tide in feet above MLLW")
    kind: TideKind = Field(..., alias="type", description="high, low or reading")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

DateBucketedTides = Dict[str, List[TidePrediction]]

class OverviewResponse(BaseModel):
    """Free overview of one featured station"""
    station: FeaturedStation
    tides: List[TidePrediction]
    fetched_at: str = Field(..., alias="fetchedAt")
    data_source: str = Field("NOAA Tides & Currents (live)", alias="dataSource")
    available_stations: int = Field(..., alias="availableStations")
    hint: str = "Use paid endpoints for specific stations, forecasts, and full conditions"

    model_config = ConfigDict(populate_by_name=True)

class TodayTidesResponse(BaseModel):
    """Today's high/low tides for a station"""
    station_id: str = Field(..., alias="stationId")
    date: str = Field(..., description="UTC calendar date, YYYY-MM-DD")
    tides: List[TidePrediction]
    units: str
    fetched_at: str = Field(..., alias="fetchedAt")

    model_config = ConfigDict(populate_by_name=True)

class ForecastResponse(BaseModel):
    """Multi-day tide predictions grouped by date"""
    station_id: str = Field(..., alias="stationId")
    days: int
    forecast: DateBucketedTides
    units: str
    fetched_at: str = Field(..., alias="fetchedAt")

    model_config = ConfigDict(populate_by_name=True)
