import logging.config
from typing import Optional

from . import config

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    },
    "root": {"handlers": ["console"], "level": "INFO"},
}


def configure_logging(level: Optional[str] = None):
    settings = dict(LOGGING, root=dict(LOGGING["root"], level=(level or config.LOG_LEVEL).upper()))
    logging.config.dictConfig(settings)
