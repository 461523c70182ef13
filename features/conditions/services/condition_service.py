import asyncio
import logging
from datetime import datetime
from typing import List, Optional, Union

from features.common.exceptions.coops_exceptions import CoopsRequestError, CoopsResponseError
from features.common.models.error_types import ErrorResponse
from features.common.services.coops_client import CoopsClient
from features.common.utils.timestamps import date_str, utc_now_iso
from features.conditions.models.condition_types import (
    ConditionsResponse,
    ReportResponse,
    ReportSummary,
    TodayTides,
    Units
)
from features.stations.services.station_service import StationService
from features.tides.models.tide_types import TideKind, TidePrediction
from features.tides.services.tide_normalizer import (
    bucket_by_date,
    count_by_kind,
    next_upcoming,
    parse_tides
)
from features.wind.services.wind_normalizer import classify_wind
from features.wind.services.wind_service import WindService
from core.config import settings

logger = logging.getLogger(__name__)

class ConditionService:
    """Combines tides, wind and station metadata for one station.

    The upstream fetches run concurrently. Wind and station metadata are
    optional and degrade to None / a placeholder station. Tides are required:
    a failed request turns the whole response into an ErrorResponse, while an
    error reported by CO-OPS (e.g. a station without predictions) yields an
    empty tide list.
    """

    def __init__(
        self,
        client: CoopsClient,
        station_service: StationService,
        wind_service: WindService
    ):
        self.client = client
        self.station_service = station_service
        self.wind_service = wind_service

    def _units(self) -> Units:
        return Units(tide=settings.tide_units, wind=settings.wind_units)

    async def _fetch_tides(
        self,
        station_id: str,
        begin_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[TidePrediction]:
        try:
            raw = await self.client.get_predictions(station_id, begin_date=begin_date, end_date=end_date)
        except CoopsResponseError as e:
            logger.warning(f"No tide predictions for station {station_id}: {str(e)}")
            return []
        return parse_tides(raw)

    async def get_conditions(self, station_id: str) -> Union[ConditionsResponse, ErrorResponse]:
        """Today's tides, latest wind and station metadata."""
        try:
            tides, wind, station = await asyncio.gather(
                self._fetch_tides(station_id),
                self.wind_service.get_latest_wind(station_id),
                self.station_service.get_station_details(station_id)
            )
        except CoopsRequestError as e:
            logger.error(f"Error getting conditions for station {station_id}: {str(e)}")
            return ErrorResponse(error=str(e), station_id=station_id)

        return ConditionsResponse(
            station=station.model_copy(update={"tide_type": None}),
            tides=tides,
            wind=wind,
            units=self._units(),
            fetched_at=utc_now_iso()
        )

    async def get_report(
        self,
        station_id: str,
        now: Optional[datetime] = None
    ) -> Union[ReportResponse, ErrorResponse]:
        """Today's tides with the next one, a multi-day forecast, wind and a summary."""
        try:
            today_tides, forecast_tides, wind, station = await asyncio.gather(
                self._fetch_tides(station_id),
                self._fetch_tides(
                    station_id,
                    begin_date=date_str(0),
                    end_date=date_str(settings.report_forecast_days)
                ),
                self.wind_service.get_latest_wind(station_id),
                self.station_service.get_station_details(station_id)
            )
        except CoopsRequestError as e:
            logger.error(f"Error building report for station {station_id}: {str(e)}")
            return ErrorResponse(error=str(e), station_id=station_id)

        return ReportResponse(
            station=station,
            today=TodayTides(
                tides=today_tides,
                next_tide=next_upcoming(today_tides, now)
            ),
            five_day_forecast=bucket_by_date(forecast_tides),
            current_wind=wind,
            summary=ReportSummary(
                high_tides_per_day=count_by_kind(today_tides, TideKind.HIGH),
                low_tides_per_day=count_by_kind(today_tides, TideKind.LOW),
                wind_conditions=classify_wind(wind)
            ),
            units=self._units(),
            generated_at=utc_now_iso()
        )
