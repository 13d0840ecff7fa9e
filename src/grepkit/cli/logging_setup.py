"""Logging configuration for the ``grepkit`` logger tree.

Modules log through ``logging.getLogger(__name__)`` and never configure
handlers themselves.  The CLI installs a single Rich handler on stderr,
at the level named by ``GREPKIT_LOG_LEVEL`` (default ``WARNING``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME: str = "grepkit"
LOG_LEVEL_ENV: str = "GREPKIT_LOG_LEVEL"
DEFAULT_LEVEL: int = logging.WARNING

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def log_level_from_env(environ: Mapping[str, str]) -> int:
    """Return the level named in *environ*, or :data:`DEFAULT_LEVEL`.

    Names are case-insensitive; unknown names fall back to the default.
    """
    raw = environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return _LEVELS.get(raw, DEFAULT_LEVEL)


def configure_logging(level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Attach a stderr :class:`RichHandler` to the ``grepkit`` logger.

    Calling this again replaces the previous handler rather than
    stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
