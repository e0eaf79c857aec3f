"""
Structured logging for the TestRail client.

Provides JSON-formatted logs with timestamps and structured fields, or plain
text logs for interactive use.
"""
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Union

ROOT_LOGGERS = ('core', 'infrastructure')

TEXT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


# Attributes every LogRecord carries; anything else came in through extra=
RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'message', 'asctime'}

# Request context set by the dispatcher
REQUEST_FIELDS = ('method', 'address', 'status', 'detail')


def _json_safe(value):
    try:
        json.dumps(value)
        return value
    except (TypeError, ValueError):
        return str(value)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    Request context passed via ``extra=`` (method, address, status, detail)
    is grouped under ``request``; other extra fields stay at the top level.
    Timestamps are the record's creation time in UTC.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        request = {}

        for key, value in record.__dict__.items():
            if key in RECORD_ATTRS:
                continue
            if key in REQUEST_FIELDS:
                if value is not None:
                    request[key] = _json_safe(value)
            else:
                entry[key] = _json_safe(value)

        if request:
            entry["request"] = request
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = "text",
    stream=None,
    log_file: Optional[str] = None
) -> None:
    """Attach handlers to the client's package loggers.

    Args:
        level: Logging level (int or name such as "DEBUG")
        fmt: "json" for StructuredFormatter, anything else for plain text
        stream: Output stream for the console handler (default stderr)
        log_file: Optional path for an additional file handler
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    if fmt.lower() == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for name in ROOT_LOGGERS:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        package_logger.handlers = []  # Clear existing handlers
        for handler in handlers:
            handler.setFormatter(formatter)
            package_logger.addHandler(handler)
