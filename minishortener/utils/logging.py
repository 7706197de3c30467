"""Application-wide logging initialization

Call `initialize_logging()` once from the embedding application before any
other logging is done. Library modules only ever call `logging.getLogger`.

Logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "minishortener.registry",
    "message": "Record added.",
    "recordId": 1,
    "event": "record_added"
}
"""

import json
import logging
import logging.config
from datetime import datetime, UTC
from typing import IO

from minishortener.utils.config import log_level


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(logging.LogRecord('', 0, '', 0, '', None, None).__dict__) | {'message', 'asctime'}

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None, stream: IO[str] | None = None) -> None:
    """Install the JSON stdout handler on the root logger

    Args:
        level (str | None):
            Logging level name. Falls back to `LOG_LEVEL`, then `INFO`.
        stream (IO[str] | None):
            Stream to write to. Defaults to `sys.stdout`.
    """
    handler = {
        'class': 'logging.StreamHandler',
        'formatter': 'json',
        'stream': stream if stream is not None else 'ext://sys.stdout',
    }
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
                'stdout': handler,
            },
            'root': {
                'level': (level or log_level()).upper(),
                'handlers': ['stdout'],
            },
        }
    )
