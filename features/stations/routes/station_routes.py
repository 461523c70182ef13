from typing import Union
from fastapi import APIRouter, Depends, Query, Request
from features.common.models.error_types import ErrorResponse
from features.entrypoints.registry import ENTRYPOINTS
from features.stations.models.station_types import StationSearchResponse
from features.stations.services.station_service import StationService
from core.config import settings

router = APIRouter(
    prefix="/stations",
    tags=["Stations"]
)

def get_service(request: Request) -> StationService:
    """Dependency to get the StationService instance."""
    return request.app.state.station_service

@router.get(
    "/search",
    response_model=Union[StationSearchResponse, ErrorResponse],
    response_model_exclude_none=True,
    summary="Search tide stations by state",
    description=ENTRYPOINTS["search"].description
)
async def search_stations(
    state: str = Query(..., min_length=2, max_length=2, description="US state code (e.g., CA, NY, FL, HI)"),
    limit: int = Query(settings.default_search_limit, ge=1, description="Max results to return"),
    service: StationService = Depends(get_service)
) -> Union[StationSearchResponse, ErrorResponse]:
    return await service.search_stations(state, limit)
