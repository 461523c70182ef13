from typing import Dict

from features.entrypoints.models.entrypoint_types import Entrypoint, EntrypointManifest
from core.config import settings

SERVICE_NAME = "tide-tracker"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = (
    "Real-time tide predictions, coastal conditions, and marine intelligence powered by NOAA data. "
    "Perfect for surfers, fishermen, boaters, and coastal enthusiasts."
)

_ROUTES = {
    "overview": ("/overview", "Free overview - current tide status for featured US coastal stations"),
    "tides": ("/tides/{station_id}", "Get today's high/low tides for any NOAA station"),
    "search": ("/stations/search", "Search for tide stations by US state code"),
    "forecast": ("/tides/{station_id}/forecast", "Get tide predictions for multiple days ahead"),
    "conditions": ("/conditions/{station_id}", "Get full current conditions including tides and wind"),
    "report": (
        "/conditions/{station_id}/report",
        "Full coastal intelligence report with tides, forecast, nearby stations, and conditions"
    )
}

ENTRYPOINTS: Dict[str, Entrypoint] = {
    key: Entrypoint(
        key=key,
        path=path,
        description=description,
        price=settings.prices.get(key, 0)
    )
    for key, (path, description) in _ROUTES.items()
}

def get_manifest() -> EntrypointManifest:
    return EntrypointManifest(
        name=SERVICE_NAME,
        version=SERVICE_VERSION,
        description=SERVICE_DESCRIPTION,
        entrypoints=list(ENTRYPOINTS.values())
    )
