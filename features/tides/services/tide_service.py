import logging
import random
from typing import Union

from features.common.exceptions.coops_exceptions import CoopsError
from features.common.models.error_types import ErrorResponse
from features.common.models.station_types import FeaturedStation
from features.common.services.coops_client import CoopsClient
from features.common.utils.timestamps import date_str, utc_now_iso, utc_today_iso
from features.tides.models.tide_types import ForecastResponse, OverviewResponse, TodayTidesResponse
from features.tides.services.tide_normalizer import bucket_by_date, parse_tides
from core.config import settings

logger = logging.getLogger(__name__)

class TideService:
    """Tide predictions from NOAA CO-OPS."""

    def __init__(self, client: CoopsClient) -> None:
        self.client = client

    async def get_overview(self) -> Union[OverviewResponse, ErrorResponse]:
        """Today's tides for a randomly chosen featured station."""
        featured = FeaturedStation(**random.choice(settings.featured_stations))
        try:
            raw = await self.client.get_predictions(featured.id)
        except CoopsError as e:
            logger.error(f"Error getting overview tides for station {featured.id}: {str(e)}")
            return ErrorResponse(error=str(e), station_id=featured.id)

        return OverviewResponse(
            station=featured,
            tides=parse_tides(raw),
            fetched_at=utc_now_iso(),
            available_stations=settings.available_stations
        )

    async def get_today_tides(self, station_id: str) -> Union[TodayTidesResponse, ErrorResponse]:
        """Today's high/low tides for a station."""
        try:
            raw = await self.client.get_predictions(station_id)
        except CoopsError as e:
            logger.error(f"Error getting tides for station {station_id}: {str(e)}")
            return ErrorResponse(error=str(e), station_id=station_id)

        return TodayTidesResponse(
            station_id=station_id,
            date=utc_today_iso(),
            tides=parse_tides(raw),
            units=settings.tide_units,
            fetched_at=utc_now_iso()
        )

    async def get_forecast(self, station_id: str, days: int) -> Union[ForecastResponse, ErrorResponse]:
        """Tide predictions from today through ``days`` days ahead, grouped by date."""
        try:
            raw = await self.client.get_predictions(
                station_id,
                begin_date=date_str(0),
                end_date=date_str(days)
            )
        except CoopsError as e:
            logger.error(f"Error getting {days}-day forecast for station {station_id}: {str(e)}")
            return ErrorResponse(error=str(e), station_id=station_id)

        return ForecastResponse(
            station_id=station_id,
            days=days,
            forecast=bucket_by_date(parse_tides(raw)),
            units=settings.tide_units,
            fetched_at=utc_now_iso()
        )
