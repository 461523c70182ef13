from typing import Union
from fastapi import APIRouter, Depends, Path, Request
from features.common.models.error_types import ErrorResponse
from features.conditions.models.condition_types import ConditionsResponse, ReportResponse
from features.conditions.services.condition_service import ConditionService
from features.entrypoints.registry import ENTRYPOINTS

router = APIRouter(
    prefix="/conditions",
    tags=["Conditions"]
)

def get_service(request: Request) -> ConditionService:
    """Dependency to get the ConditionService instance."""
    return request.app.state.condition_service

@router.get(
    "/{station_id}",
    response_model=Union[ConditionsResponse, ErrorResponse],
    summary="Current conditions for a station",
    description=ENTRYPOINTS["conditions"].description
)
async def get_conditions(
    station_id: str = Path(..., description="NOAA station ID"),
    service: ConditionService = Depends(get_service)
) -> Union[ConditionsResponse, ErrorResponse]:
    return await service.get_conditions(station_id)

@router.get(
    "/{station_id}/report",
    response_model=Union[ReportResponse, ErrorResponse],
    summary="Coastal report for a station",
    description=ENTRYPOINTS["report"].description
)
async def get_report(
    station_id: str = Path(..., description="NOAA station ID"),
    service: ConditionService = Depends(get_service)
) -> Union[ReportResponse, ErrorResponse]:
    return await service.get_report(station_id)
