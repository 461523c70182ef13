from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer

class Station(BaseModel):
    """Tide station metadata as reported by CO-OPS."""
    id: str = Field(..., description="NOAA station identifier")
    name: str = Field(..., description="Station name")
    lat: Optional[float] = Field(None, description="Latitude")
    lng: Optional[float] = Field(None, description="Longitude")
    state: Optional[str] = Field(None, description="Two-letter US state code")
    timezone: Optional[str] = None
    tide_type: Optional[str] = Field(None, alias="tideType", description="Harmonic or Subordinate")

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_unknown_fields(self, handler) -> Dict[str, Any]:
        # Metadata CO-OPS didn't report is left out rather than sent as null
        return {k: v for k, v in handler(self).items() if v is not None}

class FeaturedStation(BaseModel):
    """Station highlighted by the free overview."""
    id: str
    name: str
