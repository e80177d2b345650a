"""Logging setup for applications embedding the client."""

import logging

LOGGER_NAME = "openmensa_client"
_HANDLER_NAME = "openmensa_client.stream"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.INFO, fmt: str = _FORMAT) -> logging.Logger:
    """Attach a stream handler to the client logger and return the logger.

    Calling again only updates the level; the handler is installed once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        return logger
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
