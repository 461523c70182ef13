import math
from typing import Any, Optional

class UpstreamValues:
    """Permissive parsing for the numeric strings CO-OPS returns."""

    @staticmethod
    def to_float(value: Any) -> float:
        """Parse a numeric string, returning NaN when it isn't one."""
        if value is None:
            return math.nan
        try:
            return float(value)
        except (ValueError, TypeError):
            return math.nan

    @staticmethod
    def to_int(value: Any) -> Optional[int]:
        """Parse an integer string, truncating decimals. None when unparseable."""
        if value is None:
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            pass
        number = UpstreamValues.to_float(value)
        if math.isnan(number) or math.isinf(number):
            return None
        return int(number)
