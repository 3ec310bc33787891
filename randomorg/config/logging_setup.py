"""Logging configuration for the `randomorg` logger hierarchy."""

from __future__ import annotations

import logging

from logfmter import Logfmter

from .settings import RandomOrgSettings


def config_configure_logging(settings: RandomOrgSettings) -> logging.Logger:
    """Install one stream handler on the package logger.

    Args:
        settings: Validated settings providing level and format.

    Returns:
        logging.Logger: The configured `randomorg` logger.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if settings.logfmt_enabled:
        formatter: logging.Formatter = Logfmter(
            keys=["at", "when", "name", "msg"],
            mapping={"at": "levelname", "when": "asctime"},
            datefmt="%Y%m%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    logger = logging.getLogger("randomorg")
    logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    logger.handlers = [stream_handler]
    logger.propagate = False
    return logger
