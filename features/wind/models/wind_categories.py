from typing import Optional

from .wind_types import WindConditionsEnum, WindReading

WINDY_THRESHOLD_KNOTS = 15
MODERATE_THRESHOLD_KNOTS = 8

class WindConditions:
    """Coarse wind categories used by the coastal report."""

    @classmethod
    def from_reading(cls, reading: Optional[WindReading]) -> WindConditionsEnum:
        if reading is None:
            return WindConditionsEnum.UNKNOWN
        if reading.speed > WINDY_THRESHOLD_KNOTS:
            return WindConditionsEnum.WINDY
        if reading.speed > MODERATE_THRESHOLD_KNOTS:
            return WindConditionsEnum.MODERATE
        return WindConditionsEnum.CALM
