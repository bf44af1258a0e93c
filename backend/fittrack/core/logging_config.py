import logging
import sys

from pythonjsonlogger import jsonlogger

from fittrack.core.config import settings


def setup_logging():
    """Configure the root logger once for the whole service."""
    logger = logging.getLogger()
    logger.setLevel(settings.log_level.upper())

    log_format = "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s"
    if settings.log_json:
        formatter = jsonlogger.JsonFormatter(log_format)
    else:
        formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(console_handler)

    # Reduce noisy libraries
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.info("Logging initialized")
    return logger
