import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route application loggers to stderr at the configured level.

    Repository writes log at INFO; query sizes and lookups log at DEBUG.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("storefront").setLevel(level.upper())
