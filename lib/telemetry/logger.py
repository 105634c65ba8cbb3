"""Logging wiring shared by the services."""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str):
    return logging.getLogger(name)


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler at ``level`` unless one is already present."""

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
