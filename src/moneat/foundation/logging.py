"""
Console logging for MONEAT runs.

Library modules only create module loggers under the "moneat" namespace;
attaching a handler is left to applications, or to configure_moneat_logging()
for scripts and notebooks that want progress and threshold messages.
"""

from __future__ import annotations

import logging
from typing import TextIO

LOGGER_NAME = "moneat"
DEFAULT_FORMAT = "%(name)s: %(message)s"


def configure_moneat_logging(
    *,
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the "moneat" logger.

    Nothing changes when the root logger or the "moneat" logger already has
    handlers, so an application's own setup always wins. Records do not
    propagate to the root logger once the handler is attached.

    Returns:
        The "moneat" logger.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if logging.getLogger().handlers or package_logger.handlers:
        return package_logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


__all__ = ["DEFAULT_FORMAT", "LOGGER_NAME", "configure_moneat_logging"]
