import logging
import logging.config

from .config import LOG_LEVEL


def setup_logging(log_level: str | None = None) -> None:
    """Configure console logging for the pagescore loggers."""
    level = (log_level or LOG_LEVEL).upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            "pagescore": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    })
