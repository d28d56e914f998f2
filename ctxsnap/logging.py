"""Console and log-file output for snapshot runs."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import TextIO

_LOGGER_NAME = "ctxsnap"

CONSOLE_FORMAT = "[ctxsnap] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class _UTCFormatter(logging.Formatter):
    """Stamps file records in the same UTC form as the generated document."""

    converter = time.gmtime
    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03dZ"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``ctxsnap`` or a child logger such as ``ctxsnap.writer``."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a console handler and, when ``log_file`` is set, an appending file sink.

    The console shows INFO and above unless ``verbose`` is set. The log file
    always records DEBUG so a build log keeps per-file detail without noisy
    console output. Calling this again replaces the previous handlers.
    """
    console_level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose or log_file is not None else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(_UTCFormatter(FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "configure_logging", "get_logger"]
