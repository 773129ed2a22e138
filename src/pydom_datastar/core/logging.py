"""
Logging configuration for the Datastar demo.

Configures loguru and routes the standard library loggers (uvicorn) into it.
"""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """
    Handler that intercepts all log requests and passes them to loguru.

    For more info see:
    https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Propagate logs to loguru."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        # Find caller from where the logged message originated
        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def configure_logging(log_level: str = "info", debug: bool = False) -> None:
    """
    Configure loguru logging for the demo server and CLI.

    Args:
        log_level: Logging level (debug, info, warning, error, critical, trace)
        debug: Whether debug mode is enabled
    """
    intercept_handler = InterceptHandler()
    logging.basicConfig(handlers=[intercept_handler], level=logging.NOTSET, force=True)

    loggers = (
        logging.getLogger(name)
        for name in logging.root.manager.loggerDict
        if name.startswith("uvicorn.")
    )
    for uvicorn_logger in loggers:
        uvicorn_logger.handlers = []

    logging.getLogger("uvicorn").handlers = [intercept_handler]

    actual_level = "debug" if debug else log_level

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>",
        level=actual_level.upper(),
        colorize=True,
    )

    logger.debug(f"Logging configured at level: {actual_level.upper()}")
