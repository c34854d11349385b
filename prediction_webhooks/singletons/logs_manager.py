import logging
import sys

import structlog

from ..config.settings import get_settings
from .singleton_decorator import singleton

LOGGER_NAME = "prediction_webhooks"


@singleton
class LogsManager:
    """
    Owns the package logger. Configured once per process; every module
    fetches its logger through ``LogsManager().get_logger()`` and passes
    context as keyword arguments.
    """

    def __init__(self):
        std_logger = logging.getLogger(LOGGER_NAME)
        std_logger.setLevel(get_settings().log_level)

        if not std_logger.handlers:
            std_logger.addHandler(logging.StreamHandler(sys.stderr))

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self.logger = structlog.get_logger(LOGGER_NAME)

    def get_logger(self):
        return self.logger
