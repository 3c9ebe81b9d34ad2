"""Logging setup for the command line entry point."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
PACKAGE_LOGGER = "copilot_cli"


def setup_logging(verbose: bool = False) -> logging.Handler:
    """Attach a stderr handler to the package logger.

    Library modules only create loggers; handlers are installed here, once
    per CLI invocation. Any handler from a previous call is replaced.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def teardown_logging(handler: logging.Handler) -> None:
    """Detach a handler installed by setup_logging."""
    logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)
    handler.close()
