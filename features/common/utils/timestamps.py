from datetime import datetime, timedelta, timezone

def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

def utc_today_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")

def date_str(offset_days: int = 0) -> str:
    """UTC calendar date shifted by ``offset_days``, formatted YYYYMMDD."""
    day = datetime.now(timezone.utc) + timedelta(days=offset_days)
    return day.strftime("%Y%m%d")
