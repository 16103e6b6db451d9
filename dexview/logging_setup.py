"""Logging configuration for the web application."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the ``dexview`` logger tree.

    Unknown level names fall back to INFO.  Calling this twice does not
    add a second handler.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logger = logging.getLogger("dexview")
    logger.setLevel(resolved)
    if not any(getattr(h, "_dexview", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._dexview = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
