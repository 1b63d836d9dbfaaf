import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "business-health-engine"
LOG_FORMAT = '%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s'


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON log lines tagged with the service name, UTC ISO timestamp and call site."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = (log_record.get('level') or record.levelname).upper()
        log_record['service'] = SERVICE_NAME
        log_record['module'] = record.module
        log_record['lineno'] = record.lineno
        log_record['pathname'] = record.pathname


def _has_json_handler(logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, CustomJsonFormatter) for h in logger.handlers)


def setup_logging(log_level_str: str = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Configures structured JSON logging on the root logger.

    Safe to call more than once: the JSON handler is only installed the first
    time, later calls just adjust the level. Unknown level names fall back to INFO.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not _has_json_handler(root_logger):
        log_handler = logging.StreamHandler(stream or sys.stdout)
        log_handler.setFormatter(CustomJsonFormatter(LOG_FORMAT))
        root_logger.addHandler(log_handler)
        root_logger.info(f"Structured JSON logging configured with level: {logging.getLevelName(log_level)}")
    else:
        root_logger.debug(f"JSON logging already configured; level now {logging.getLevelName(log_level)}")
    return root_logger


if __name__ == '__main__':
    setup_logging(log_level_str="DEBUG")
    logging.getLogger("services.health_engine.scorer").debug("Debug message from the scorer.")
    logging.getLogger("services.health_engine.loader").info("Info message from the loader.", extra={"path": "content.yml"})
