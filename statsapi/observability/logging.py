"""Logging for the statistics API: one stdout handler on the root logger.

uvicorn's loggers are routed through it, the per-request access log can be
switched off with ACCESS_LOG=0, and the multipart parser is held at WARNING
because it logs every chunk of an upload at DEBUG.
"""
from __future__ import annotations

import logging
import sys

from statsapi import config

LOG_FORMAT = "[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
# Upload parsing internals (python-multipart; older releases log as "multipart")
NOISY_LOGGERS = ("python_multipart", "multipart")

_configured = False


def setup_logging(level: str | int | None = None, *, force: bool = False) -> bool:
    """Attach the stdout handler and set levels.

    ``level`` defaults to LOG_LEVEL. Only the first call configures anything
    unless ``force`` is set; returns whether this call did.
    """
    global _configured
    if _configured and not force:
        return False
    level = level or config.LOG_LEVEL

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
        uv_logger.setLevel(level)
    logging.getLogger("uvicorn.access").disabled = not config.ACCESS_LOG

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    return True
