"""Logging configuration for randoid."""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages toward loguru."""

    def emit(self, record):
        # Get corresponding loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(log_level: str, compact: bool = False):
    """Configure loguru logging and enable randoid's own messages.

    Args:
        log_level: Log level to use (from settings or CLI args).
        compact: Use a ``level | message`` format without timestamps.
    """
    log_level = log_level.upper()

    logger.remove()  # Remove default handler
    if compact:
        logger.add(
            sys.stderr,
            format="<level>{level: <8}</level> | <level>{message}</level>",
            level=log_level,
            colorize=True,
        )
    else:
        logger.add(sys.stderr, level=log_level, colorize=True)

    logger.enable("randoid")
    logger.debug(f"Log level set to: {log_level}")

    # Redirect all standard logging to loguru
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
