import logging
from datetime import datetime, timezone, timedelta

from core.config import settings

class LocalTimeFormatter(logging.Formatter):
    def __init__(self, fmt: str, utc_offset_hours: int = -5, tz_label: str = "EST"):
        super().__init__(fmt=fmt)
        self.tz = timezone(timedelta(hours=utc_offset_hours))
        self.tz_label = tz_label

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        local = dt.astimezone(self.tz)
        return f"{local.strftime(datefmt or '%Y-%m-%d %H:%M:%S')} {self.tz_label}"

    def format(self, record: logging.LogRecord) -> str:
        # Extract just the module name from the dotted logger path
        record.name = record.name.split('.')[-1]
        return super().format(record)

def setup_logging() -> None:
    formatter = LocalTimeFormatter(
        fmt="[%(levelname)s] %(asctime)s | %(name)s | %(message)s",
        utc_offset_hours=settings.log_utc_offset_hours,
        tz_label=settings.log_tz_label
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    # Remove existing handlers and add our custom handler
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    # Set specific log levels for noisy libraries
    logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
