from __future__ import annotations

import logging

LOGGER_NAME = "ola_client"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def enable_logging(verbose: bool = False, handler: logging.Handler | None = None) -> logging.Logger:
    """Attach a handler to the ``ola_client`` logger and set its level.

    Only this package's logger is touched; the root logger and the httpx
    loggers are left to the application. Calling it again swaps the
    previously attached handler instead of stacking another one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for existing in list(logger.handlers):
        if getattr(existing, "_ola_client_handler", False):
            logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._ola_client_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
