from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List

class Settings(BaseSettings):
    """Application settings."""

    # NOAA CO-OPS endpoints
    coops_base_url: str = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    coops_metadata_url: str = "https://api.tidesandcurrents.noaa.gov/mdapi/prod/webapi"
    coops_params: Dict[str, str] = {
        "product": "predictions",
        "datum": "MLLW",
        "units": "english",
        "time_zone": "lst_ldt",
        "format": "json",
        "interval": "hilo"
    }
    coops_wind_params: Dict[str, str] = {
        "product": "wind",
        "units": "english",
        "time_zone": "lst_ldt",
        "format": "json"
    }
    request_timeout: int = 30  # seconds, single attempt per upstream call

    # Stations picked from at random by the free overview
    featured_stations: List[Dict[str, str]] = [
        {"id": "9414290", "name": "San Francisco, CA"},
        {"id": "8518750", "name": "The Battery, NY"},
        {"id": "8723214", "name": "Miami Beach, FL"},
        {"id": "1612340", "name": "Honolulu, HI"},
        {"id": "9410660", "name": "Los Angeles, CA"}
    ]
    available_stations: int = 3379

    default_search_limit: int = 20
    default_forecast_days: int = 3
    max_forecast_days: int = 7
    report_forecast_days: int = 5

    # Entrypoint prices in USDC base units (1000 = $0.001)
    prices: Dict[str, int] = {
        "overview": 0,
        "tides": 1000,
        "search": 2000,
        "forecast": 2000,
        "conditions": 3000,
        "report": 5000
    }

    tide_units: str = "feet (MLLW datum)"
    wind_units: str = "knots"

    log_level: str = "INFO"
    log_utc_offset_hours: int = -5  # EST
    log_tz_label: str = "EST"

    model_config = SettingsConfigDict(
        env_prefix="tide_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
