"""
Logging Setup

Provides centralized logging configuration for the readiness services
with structured output.
"""

import logging
import sys


def setup_logger(name='readiness', level='INFO'):
    """
    Configure logging for a readiness logger.

    Sets up:
    - Structured log format with timestamps
    - Console output to stdout
    - Log level from configuration

    Calling this more than once for the same logger only updates the level.

    Args:
        name: Logger name
        level: Level name (e.g. "DEBUG", "INFO") or logging constant

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    if not any(getattr(h, '_readiness_handler', False) for h in logger.handlers):
        # Create console handler
        handler = logging.StreamHandler(sys.stdout)

        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s in %(module)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        handler._readiness_handler = True
        logger.addHandler(handler)

        # Prevent duplicate logs from propagating
        logger.propagate = False

        logger.debug(f"Logging configured - Level: {logging.getLevelName(logger.level)}")

    return logger
