import logging.config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send `library_catalog` logs to stdout at `level`.

    Unknown level names fall back to INFO. The uvicorn access log is
    limited to warnings.
    """
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"catalog": {"format": LOG_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "catalog",
                    "stream": "ext://sys.stdout",
                }
            },
            "loggers": {
                "library_catalog": {"level": level, "handlers": ["stdout"], "propagate": True},
                "uvicorn.access": {"level": "WARNING"},
            },
        }
    )
