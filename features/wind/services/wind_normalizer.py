from typing import Any, Dict, Optional, Sequence

from features.common.utils.conversions import UpstreamValues
from features.wind.models.wind_categories import WindConditions
from features.wind.models.wind_types import WindConditionsEnum, WindReading

def parse_wind(raw_series: Optional[Sequence[Dict[str, Any]]]) -> Optional[WindReading]:
    """Build a WindReading from the latest sample of a CO-OPS wind series.

    CO-OPS returns samples in ascending time order, so the last element is
    the most recent one.
    """
    if not raw_series:
        return None

    latest = raw_series[-1]
    return WindReading(
        time=latest.get("t", ""),
        speed=UpstreamValues.to_float(latest.get("s")),
        direction=UpstreamValues.to_int(latest.get("d")),
        direction_label=latest.get("dr"),
        gust=UpstreamValues.to_float(latest.get("g"))
    )

def classify_wind(reading: Optional[WindReading]) -> WindConditionsEnum:
    return WindConditions.from_reading(reading)
