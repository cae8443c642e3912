"""Logging setup for command-line use.

Library modules only create loggers with logging.getLogger(__name__);
handlers are installed here, by the CLI.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Install a stderr handler for the workflow_viz loggers."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
    )
    return logging.getLogger("workflow_viz")
