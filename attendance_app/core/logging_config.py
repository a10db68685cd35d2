# /attendance_app/core/logging_config.py

import logging
import sys

from . import config

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    """
    Attaches a single stdout handler to the package logger.

    Safe to call more than once (e.g. from the app lifespan and from tests):
    the handler is only added the first time.
    """
    package_logger = logging.getLogger("attendance_app")
    package_logger.setLevel(level)

    if not any(getattr(h, "_attendance_handler", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._attendance_handler = True
        package_logger.addHandler(handler)
