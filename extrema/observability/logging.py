"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

DEFAULT_LEVEL = logging.INFO

def setup_logging(level: str | int = DEFAULT_LEVEL) -> None:
    """Configure standard Python logging.

    Call **exactly once** at app startup; later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return

    # Accept level names from EXTREMA_LOG_LEVEL; unknown names fall back to INFO
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = DEFAULT_LEVEL

    # Create a standard formatter with gunicorn-like brackets
    formatter = logging.Formatter(
        fmt='[%(asctime)s] [%(process)d] [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S %z'
    )

    # Configure stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Configure root logger; extrema.* module loggers propagate here
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Configure uvicorn loggers to propagate to root logger
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.handlers.clear()  # Remove any existing handlers
        logger.propagate = True  # Propagate logs to root logger
        logger.setLevel(level)

    setup_logging._configured = True  # type: ignore[attr-defined]
