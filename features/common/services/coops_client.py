import logging
import aiohttp
from typing import Any, Dict, List, Optional

from features.common.exceptions.coops_exceptions import CoopsRequestError, CoopsResponseError
from core.config import settings

logger = logging.getLogger(__name__)

class CoopsClient:
    """Client for the NOAA CO-OPS data and metadata APIs.

    Every call is attempted once. Failures raise CoopsRequestError; callers
    decide whether the data is required or optional.
    """

    def __init__(self):
        self.data_url = settings.coops_base_url
        self.metadata_url = settings.coops_metadata_url
        self._session: Optional[aiohttp.ClientSession] = None

    async def _init_session(self) -> aiohttp.ClientSession:
        if not self._session:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=settings.request_timeout),
                headers={"Accept": "application/json"}
            )
        return self._session

    async def close(self):
        if self._session:
            await self._session.close()
            self._session = None

    async def _fetch_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        try:
            session = await self._init_session()
            async with session.get(url, params=params) as response:
                if response.status >= 400:
                    raise CoopsRequestError(f"API error: {response.status}")
                data = await response.json(content_type=None)
        except aiohttp.ClientError as e:
            logger.error(f"Error requesting {url}: {str(e)}")
            raise CoopsRequestError(f"API request failed: {str(e)}") from e
        except TimeoutError as e:
            logger.error(f"Timed out requesting {url}")
            raise CoopsRequestError("API request timed out") from e
        except ValueError as e:
            logger.error(f"Invalid JSON from {url}: {str(e)}")
            raise CoopsRequestError(f"Invalid JSON response: {str(e)}") from e

        if not isinstance(data, dict):
            logger.error(f"Unexpected payload from {url}: {type(data).__name__}")
            raise CoopsRequestError(f"Unexpected response payload: {type(data).__name__}")
        return data

    async def get_predictions(
        self,
        station_id: str,
        begin_date: Optional[str] = None,
        end_date: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get hi/lo tide predictions, today's unless a date range is given."""
        params = {**settings.coops_params, "station": station_id}
        if begin_date and end_date:
            params["begin_date"] = begin_date
            params["end_date"] = end_date
        else:
            params["date"] = "today"

        data = await self._fetch_json(self.data_url, params)
        if "error" in data:
            error = data["error"]
            if isinstance(error, dict):
                message = error.get("message", "Unknown error from NOAA API")
            else:
                message = str(error)
            raise CoopsResponseError(message)
        return data.get("predictions") or []

    async def get_wind(self, station_id: str) -> List[Dict[str, Any]]:
        """Get today's wind observations in ascending time order."""
        params = {**settings.coops_wind_params, "station": station_id, "date": "today"}
        data = await self._fetch_json(self.data_url, params)
        return data.get("data") or []

    async def get_station(self, station_id: str) -> Optional[Dict[str, Any]]:
        """Get metadata for a single station."""
        data = await self._fetch_json(f"{self.metadata_url}/stations/{station_id}.json")
        stations = data.get("stations") or []
        return stations[0] if stations else None

    async def get_stations(self, station_type: str = "tidepredictions") -> List[Dict[str, Any]]:
        """Get every station of the given type."""
        data = await self._fetch_json(
            f"{self.metadata_url}/stations.json",
            {"type": station_type}
        )
        return data.get("stations") or []
