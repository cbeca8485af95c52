import json
import logging
import sys
from datetime import datetime, timezone


# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line, which CloudWatch Logs Insights can query
    field by field. Values passed with ``extra=`` are copied to the top level.
    """
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and key not in entry:
                entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def configure_logging(level: str = "INFO") -> None:
    """
    Sends all log output to stdout as JSON.

    Lambda keeps the process warm between invocations, so existing handlers
    are replaced rather than stacked.
    """
    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [stream]
    root_logger.setLevel(level.upper())

    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
