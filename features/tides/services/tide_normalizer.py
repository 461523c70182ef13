"""Normalization of CO-OPS tide predictions.

Predictions arrive from CO-OPS already sorted by time, and every function here
keeps that order rather than re-sorting.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Union

from features.common.utils.conversions import UpstreamValues
from features.tides.models.tide_types import DateBucketedTides, TideKind, TidePrediction

logger = logging.getLogger(__name__)

TIDE_KINDS = {
    "H": TideKind.HIGH,
    "L": TideKind.LOW
}

def parse_tides(raw_predictions: Iterable[Dict[str, Any]]) -> List[TidePrediction]:
    """Convert raw ``{t, v, type}`` records into TidePrediction, one per record."""
    return [
        TidePrediction(
            time=p.get("t", ""),
            height=UpstreamValues.to_float(p.get("v")),
            kind=TIDE_KINDS.get(p.get("type"), TideKind.READING)
        )
        for p in raw_predictions
    ]

def bucket_by_date(predictions: Iterable[TidePrediction]) -> DateBucketedTides:
    """Group predictions by the date part of their timestamp."""
    buckets: DateBucketedTides = {}
    for prediction in predictions:
        date = prediction.time.split(" ")[0]
        buckets.setdefault(date, []).append(prediction)
    return buckets

def _parse_time(value: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(value.replace(" ", "T", 1))
    except ValueError:
        logger.debug(f"Skipping unparseable prediction time {value!r}")
        return None

def next_upcoming(
    predictions: Iterable[TidePrediction],
    now: Union[datetime, str, None] = None
) -> Optional[TidePrediction]:
    """Return the first prediction strictly later than ``now``.

    Prediction times are naive local station times. An aware ``now`` is
    converted to the server's local time before comparing.
    """
    if now is None:
        now = datetime.now()
    elif isinstance(now, str):
        now = datetime.fromisoformat(now)
    if now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)

    for prediction in predictions:
        when = _parse_time(prediction.time)
        if when is not None and when > now:
            return prediction
    return None

def count_by_kind(predictions: Iterable[TidePrediction], kind: TideKind) -> int:
    return sum(1 for p in predictions if p.kind == kind)
