import logging
from typing import Optional

from features.common.exceptions.coops_exceptions import CoopsError
from features.common.services.coops_client import CoopsClient
from features.wind.models.wind_types import WindReading
from features.wind.services.wind_normalizer import parse_wind

logger = logging.getLogger(__name__)

class WindService:
    def __init__(self, client: CoopsClient):
        self.client = client

    async def get_latest_wind(self, station_id: str) -> Optional[WindReading]:
        """Latest wind observation, or None when the station reports none."""
        try:
            series = await self.client.get_wind(station_id)
        except CoopsError as e:
            logger.warning(f"Wind data unavailable for station {station_id}: {str(e)}")
            return None
        return parse_wind(series)
