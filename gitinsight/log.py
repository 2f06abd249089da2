"""Console logging for the gitinsight logger hierarchy."""

from __future__ import annotations

import logging

LOGGER_NAME = "gitinsight"


class HumanReadableFormatter(logging.Formatter):
    """Human-readable formatter for stderr output."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    WARNING by default, DEBUG when verbose. Safe to call repeatedly: the
    previous handler is replaced, not duplicated.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(HumanReadableFormatter())
    logger.addHandler(handler)
    return logger
