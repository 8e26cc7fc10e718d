"""Logging for the rebac package.

Every module logs through get_logger(__name__), so all records land under
the "rebac" logger. setup_logging() configures that logger only; the host
application's root logger is left alone.
"""

import logging
import sys

from rebac.core.config import Settings, get_settings

PACKAGE_LOGGER = "rebac"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings | None = None) -> logging.Logger:
    """Set the package log level and attach a stdout handler once.

    Level is DEBUG when settings.debug is True, otherwise INFO. Calling it
    again only updates the level.
    """
    settings = settings or get_settings()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Module names inside the package are used as-is; anything else is
    nested under "rebac." so setup_logging() still governs it.
    """
    if name == PACKAGE_LOGGER or name.startswith(f"{PACKAGE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")
