"""Shared logging configuration.

Provides JSON-formatted logging for sipcore tools. The library modules only
create loggers; handlers are installed by configure_logging().
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from sipcore.core import config


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        payload = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in ("header", "code"):
            if hasattr(record, k):
                payload[k] = getattr(record, k)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    log_file: Optional[str] = None,
    log_level: Optional[str] = None,
):
    """Configure logging with JSON formatter.

    Args:
        log_file: Path to log file. Defaults to SIPCORE_LOG_FILE; no file
            handler is installed when neither is set.
        log_level: Log level. Defaults to SIPCORE_LOG_LEVEL or 'WARNING'.
    """
    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(JsonFormatter())
    handlers: list[logging.Handler] = [console_handler]

    # File handler (always append)
    log_file = log_file or config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    log_level = (log_level or config.LOG_LEVEL).upper()
    root.setLevel(getattr(logging, log_level, logging.WARNING))
    root.handlers = handlers
