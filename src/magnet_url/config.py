"""Runtime settings shared by the CLI and the MCP server."""

import logging
import os

LOG_LEVEL_ENV = "MAGNET_URL_LOG_LEVEL"
LOG_FORMAT = "%(message)s"


def resolve_log_level(verbose: bool = False) -> int:
    """
    Pick the log level.

    ``--verbose`` wins; otherwise the MAGNET_URL_LOG_LEVEL environment
    variable is honored, falling back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(level=resolve_log_level(verbose), format=LOG_FORMAT)
