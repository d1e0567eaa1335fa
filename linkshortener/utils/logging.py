"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once in the composition root (the CLI
entry point or the embedding application) before any other logging is done.

Logging format (one JSON object per line):
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "linkshortener.services.url_shortener_service",
    "message": "URL shortened successfully.",
    "source": "URL_SERVICE",
    "shortcode": "abc123"
}

Besides stdout, every record is kept in a bounded in-memory buffer
(`RecentLogsHandler`) so an embedding UI can display the newest entries.
"""

import os
import json
import logging
import logging.config
from collections import deque
from datetime import datetime, UTC
from typing import Any

from linkshortener.constants import ENV, LogSource, MAX_RECENT_LOGS
from linkshortener.utils.helpers import generate_id


STANDARD_ATTRS = frozenset(
    {
        'args',
        'asctime',
        'created',
        'exc_info',
        'exc_text',
        'filename',
        'funcName',
        'levelname',
        'levelno',
        'lineno',
        'module',
        'msecs',
        'message',
        'msg',
        'name',
        'pathname',
        'process',
        'processName',
        'relativeCreated',
        'stack_info',
        'thread',
        'threadName',
        'taskName',
    }
)


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the `extra` fields attached to a LogRecord."""
    return {key: value for key, value in record.__dict__.items() if key not in STANDARD_ATTRS}


def _timestamp(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=UTC)


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = _timestamp(record).isoformat(timespec='milliseconds') \
                                      .replace('+00:00', 'Z')
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        log.update(record_extras(record))

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


class RecentLogsHandler(logging.Handler):
    """Keep the newest log entries in memory.

    Entries are plain dicts with `id`, `timestamp`, `level`, `message`,
    `data` and `source` keys. `source` comes from the `source` extra
    (`APP` when missing); every other extra lands in `data`.

    Example:
        >>> handler = RecentLogsHandler(capacity=2)
        >>> logger = logging.getLogger('demo')
        >>> logger.addHandler(handler)
        >>> logger.warning('Short code not found.', extra={'source': 'URL_SERVICE', 'shortcode': 'abc'})
        >>> handler.get_logs()[0]['data']
        {'shortcode': 'abc'}
    """

    def __init__(self, capacity: int = MAX_RECENT_LOGS, level: int = logging.NOTSET):
        super().__init__(level=level)
        self._entries: deque[dict[str, Any]] = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            data = record_extras(record)
            source = data.pop('source', LogSource.APP)
            self._entries.appendleft(
                {
                    'id': generate_id(),
                    'timestamp': _timestamp(record),
                    'level': record.levelname,
                    'message': record.getMessage(),
                    'data': data or None,
                    'source': str(source),
                }
            )
        except Exception:  # pragma: no cover
            self.handleError(record)

    def get_logs(self) -> list[dict[str, Any]]:
        """Return a copy of the buffered entries, newest first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()


recent_logs = RecentLogsHandler()


def initialize_logging(log_level: str | None = None, handler: RecentLogsHandler | None = None) -> None:
    log_level = (log_level or os.getenv(ENV.App.LOG_LEVEL, 'INFO')).upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                },
                'recent': {
                    '()': lambda: handler or recent_logs,
                },
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr', 'recent'],
            },
        }
    )
