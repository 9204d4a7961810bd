import logging
import os
import sys

from pythonjsonlogger import jsonlogger

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

_handler: logging.Handler | None = None


def _build_handler() -> logging.Handler:
    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> logging.Logger:
    """
    Configures structured JSON logging for the service.

    Installs a single stdout handler with a JSON formatter (timestamp, level,
    logger name, message, trace_id and span_id) on the root logger and on the
    Uvicorn loggers, so application and server logs share one format. The level
    comes from LOG_LEVEL (default INFO). Safe to call from every module: the
    handler is created once and reused.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _handler

    level = os.getenv("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    if _handler is not None and _handler in root_logger.handlers:
        return root_logger

    _handler = _build_handler()

    root_logger.setLevel(level)
    root_logger.handlers = [_handler]

    for logger_name in _UVICORN_LOGGERS:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = [_handler]
        u_logger.propagate = False

    return root_logger
