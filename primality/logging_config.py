"""
Structured Logging Configuration

Setup for structured logging with run IDs and JSON formatting.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from .config import Settings, get_settings


class RunIDFilter(logging.Filter):
    """Stamp every log record with the ID of the current benchmark run."""

    def __init__(self, run_id: Optional[str] = None):
        super().__init__()
        self.run_id = run_id or str(uuid.uuid4())[:8]

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, 'run_id'):
            record.run_id = self.run_id
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def __init__(self, *args: Any, settings: Optional[Settings] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._settings = settings or get_settings()

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = self._settings.app_name
        log_record['version'] = self._settings.app_version

        if not log_record.get('level'):
            log_record['level'] = record.levelname


def setup_logging(settings: Optional[Settings] = None) -> RunIDFilter:
    """
    Configure application logging.

    Clears existing root handlers and installs a single stderr handler,
    leaving stdout to the report.

    Returns:
        RunIDFilter: The filter carrying this run's ID
    """
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    run_id_filter = RunIDFilter()
    console_handler.addFilter(run_id_filter)

    if settings.log_format.lower() == 'json':
        formatter = CustomJsonFormatter(
            '%(levelname)s %(name)s %(run_id)s %(message)s',
            settings=settings,
        )
    else:
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(run_id)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - level: {settings.log_level}, format: {settings.log_format}")
    return run_id_filter
