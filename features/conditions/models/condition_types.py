from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from features.common.models.station_types import Station
from features.tides.models.tide_types import DateBucketedTides, TidePrediction
from features.wind.models.wind_types import WindConditionsEnum, WindReading

class Units(BaseModel):
    tide: str = Field(..., description="Tide height unit and datum")
    wind: str = Field(..., description="Wind speed unit")

class ConditionsResponse(BaseModel):
    """Current tides and wind for a station."""
    station: Station
    tides: List[TidePrediction]
    wind: Optional[WindReading]
    units: Units
    fetched_at: str = Field(..., alias="fetchedAt")

    model_config = ConfigDict(populate_by_name=True)

class TodayTides(BaseModel):
    tides: List[TidePrediction]
    next_tide: Optional[TidePrediction] = Field(None, alias="nextTide")

    model_config = ConfigDict(populate_by_name=True)

class ReportSummary(BaseModel):
    high_tides_per_day: int = Field(..., alias="highTidesPerDay")
    low_tides_per_day: int = Field(..., alias="lowTidesPerDay")
    wind_conditions: WindConditionsEnum = Field(..., alias="windConditions")

    model_config = ConfigDict(populate_by_name=True)

class ReportResponse(BaseModel):
    """Full coastal report for a station."""
    station: Station
    today: TodayTides
    five_day_forecast: DateBucketedTides = Field(..., alias="fiveDayForecast")
    current_wind: Optional[WindReading] = Field(None, alias="currentWind")
    summary: ReportSummary
    units: Units
    generated_at: str = Field(..., alias="generatedAt")
    data_source: str = Field("NOAA Tides & Currents", alias="dataSource")

    model_config = ConfigDict(populate_by_name=True)
