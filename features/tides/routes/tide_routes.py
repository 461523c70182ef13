from typing import Union
from fastapi import APIRouter, Depends, Path, Query, Request
from features.common.models.error_types import ErrorResponse
from features.entrypoints.registry import ENTRYPOINTS
from features.tides.models.tide_types import ForecastResponse, OverviewResponse, TodayTidesResponse
from features.tides.services.tide_service import TideService
from core.config import settings

router = APIRouter(tags=["Tides"])

def get_service(request: Request) -> TideService:
    """Dependency to get the TideService instance."""
    return request.app.state.tide_service

@router.get(
    "/overview",
    response_model=Union[OverviewResponse, ErrorResponse],
    summary="Featured station overview",
    description=ENTRYPOINTS["overview"].description
)
async def get_overview(
    service: TideService = Depends(get_service)
) -> Union[OverviewResponse, ErrorResponse]:
    return await service.get_overview()

@router.get(
    "/tides/{station_id}",
    response_model=Union[TodayTidesResponse, ErrorResponse],
    summary="Today's tides for a station",
    description=ENTRYPOINTS["tides"].description
)
async def get_today_tides(
    station_id: str = Path(..., description="NOAA station ID (e.g., 9414290 for San Francisco)"),
    service: TideService = Depends(get_service)
) -> Union[TodayTidesResponse, ErrorResponse]:
    return await service.get_today_tides(station_id)

@router.get(
    "/tides/{station_id}/forecast",
    response_model=Union[ForecastResponse, ErrorResponse],
    summary="Multi-day tide forecast",
    description=ENTRYPOINTS["forecast"].description
)
async def get_forecast(
    station_id: str = Path(..., description="NOAA station ID"),
    days: int = Query(
        settings.default_forecast_days,
        ge=1,
        le=settings.max_forecast_days,
        description="Number of days (1-7)"
    ),
    service: TideService = Depends(get_service)
) -> Union[ForecastResponse, ErrorResponse]:
    """Get tide predictions grouped by date.

    Args:
        station_id: The NOAA station identifier
        days: How many days past today to include
    """
    return await service.get_forecast(station_id, days)
