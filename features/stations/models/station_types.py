from typing import List
from pydantic import BaseModel, ConfigDict, Field

from features.common.models.station_types import Station

class StationSearchResponse(BaseModel):
    """Tide stations in one US state."""
    state: str
    count: int
    stations: List[Station]
    fetched_at: str = Field(..., alias="fetchedAt")

    model_config = ConfigDict(populate_by_name=True)
