"""Logging setup for tvdbclient.

Library modules log through child loggers of the ``tvdbclient`` package
logger (``logging.getLogger(__name__)``): requests and cache hits from
``tvdbclient.transport`` / ``tvdbclient.cache``, logins and search counts from
``tvdbclient.api``. setup_logger() attaches one console handler to the
package logger and picks its level, so turning on debug output (the
TVDBCLIENT_DEBUG=1 environment variable or ``tvdbclient --debug``) reveals
every URL the clients fetch.

The debug(), info() and error() helpers are for the CLI and log under
``tvdbclient.cli``.
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "tvdbclient"
CLI_LOGGER = f"{PACKAGE_LOGGER}.cli"

DEBUG_ON = os.getenv("TVDBCLIENT_DEBUG", "0") == "1"

_FORMAT = "[%(levelname)s] %(asctime)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logger(verbose: Optional[bool] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The console handler is added once; later calls only adjust the level.

    Args:
        verbose: Force DEBUG (True) or INFO (False). ``None`` keeps the
            current level, or follows TVDBCLIENT_DEBUG on first setup.
    """
    global _handler
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(_handler)
        if verbose is None:
            verbose = DEBUG_ON
    if verbose is not None:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def _cli_logger() -> logging.Logger:
    setup_logger()
    return logging.getLogger(CLI_LOGGER)


def debug(msg: str) -> None:
    """Log a debug message; shown only when debug output is on."""
    _cli_logger().debug(msg)


def info(msg: str) -> None:
    _cli_logger().info(msg)


def error(msg: str) -> None:
    _cli_logger().error(msg)
