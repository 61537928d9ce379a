"""
Attach a console handler to the `eventemitter` loggers.

The library only logs through module loggers and never configures logging on
import. Applications that want to see registration and dispatch traces call
`configure_logger` once.

>>> from eventemitter.Logging.Setup import configure_logger
>>> configure_logger()

Set `PY_ENV=development` to get DEBUG output, otherwise INFO is used.
"""
import logging
import os
import sys
from typing import Mapping, Optional, TextIO

from eventemitter.Logging.Formatter import log_formatter

LOGGER_NAME = "eventemitter"


def is_development(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Whether the process runs in development mode.

    Args:
        environ (Mapping[str, str], optional): Environment to read. Defaults
                                               to `os.environ`.

    Returns:
        bool: Whether `PY_ENV` is set to "development"
    """
    if environ is None:
        environ = os.environ

    return "PY_ENV" in environ and environ["PY_ENV"] == "development"


def resolve_log_level(environ: Optional[Mapping[str, str]] = None) -> int:
    """Log level for the console handler, DEBUG in development and INFO otherwise."""
    return logging.DEBUG if is_development(environ) else logging.INFO


def configure_logger(
    name: str = LOGGER_NAME,
    stream: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None
) -> logging.Logger:
    """
    Send a logger's records to a stream using the shared formatter.

    Calling this more than once for the same logger and stream does not add
    a second handler.

    Args:
        name (str, optional): Logger to configure. Defaults to LOGGER_NAME.
        stream (TextIO, optional): Output stream. Defaults to the current
                                  sys.stdout.
        environ (Mapping[str, str], optional): Environment used to pick the
                                               level. Defaults to `os.environ`.

    Returns:
        logging.Logger: The configured logger
    """
    if stream is None:
        stream = sys.stdout

    logger = logging.getLogger(name)
    level = resolve_log_level(environ)

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and handler.stream is stream:
            handler.setLevel(level)
            break
    else:
        _stream_handler = logging.StreamHandler(stream)
        _stream_handler.setFormatter(log_formatter)
        _stream_handler.setLevel(level)
        logger.addHandler(_stream_handler)

    logger.setLevel(logging.DEBUG)

    return logger
