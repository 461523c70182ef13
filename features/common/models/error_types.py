from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, model_serializer

class ErrorResponse(BaseModel):
    """Structured error returned in place of a normal payload."""
    error: str = Field(..., description="Error message")
    station_id: Optional[str] = Field(None, alias="stationId")
    state: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_missing_context(self, handler) -> Dict[str, Any]:
        # Only the context that applies to the failed request is reported
        return {k: v for k, v in handler(self).items() if v is not None}
