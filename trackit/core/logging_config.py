"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a console
handler. Log format includes the timestamp, logger name, log level and
message. Configuration happens at most once per process.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger.

    If no handlers are attached to the root logger, attach a console
    handler. The root logger's level is set from ``level`` (case
    insensitive, falls back to INFO for unknown names).
    """
    logger = logging.getLogger()
    if logger.handlers:
        # Already configured (pytest, uvicorn, or a repeated create_application call)
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
