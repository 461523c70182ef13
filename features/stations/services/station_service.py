import logging
from typing import Union

from features.common.exceptions.coops_exceptions import CoopsError
from features.common.models.error_types import ErrorResponse
from features.common.models.station_types import Station
from features.common.services.coops_client import CoopsClient
from features.common.utils.timestamps import utc_now_iso
from features.stations.models.station_types import StationSearchResponse

logger = logging.getLogger(__name__)

class StationService:
    def __init__(self, client: CoopsClient):
        self.client = client

    async def search_stations(self, state: str, limit: int) -> Union[StationSearchResponse, ErrorResponse]:
        """Find tide prediction stations in a US state."""
        state_upper = state.upper()
        try:
            raw_stations = await self.client.get_stations("tidepredictions")
        except CoopsError as e:
            logger.error(f"Error listing stations for {state_upper}: {str(e)}")
            return ErrorResponse(error=str(e), state=state_upper)

        stations = [
            Station(
                id=str(s["id"]),
                name=s.get("name") or "Unknown",
                lat=s.get("lat"),
                lng=s.get("lng"),
                state=s.get("state")
            )
            for s in raw_stations
            if isinstance(s, dict) and s.get("id") and s.get("state") == state_upper
        ][:limit]

        return StationSearchResponse(
            state=state_upper,
            count=len(stations),
            stations=stations,
            fetched_at=utc_now_iso()
        )

    async def get_station_details(self, station_id: str) -> Station:
        """Station metadata, or a placeholder named "Unknown" if it can't be fetched."""
        try:
            raw = await self.client.get_station(station_id)
        except CoopsError as e:
            logger.warning(f"Station metadata unavailable for {station_id}: {str(e)}")
            raw = {}
        if not isinstance(raw, dict):
            raw = {}

        return Station(
            id=station_id,
            name=raw.get("name") or "Unknown",
            lat=raw.get("lat"),
            lng=raw.get("lng"),
            state=raw.get("state"),
            timezone=raw.get("timezone"),
            tide_type=raw.get("tideType")
        )
