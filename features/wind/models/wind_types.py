from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class WindConditionsEnum(str, Enum):
    CALM = "calm"
    MODERATE = "moderate"
    WINDY = "windy"
    UNKNOWN = "unknown"

class WindReading(BaseModel):
    """Latest observed wind at a station."""
    time: str = Field(..., description="Local station time, YYYY-MM-DD HH:MM")
    speed: float = Field(..., description="Wind speed in knots")
    direction: Optional[int] = Field(None, description="Degrees clockwise from true N")
    direction_label: Optional[str] = Field(None, alias="directionLabel", description="Compass point, e.g. WNW")
    gust: float = Field(..., description="Gust speed in knots")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
