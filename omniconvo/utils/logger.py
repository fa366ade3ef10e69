"""Logging utility."""

import logging
import os
from typing import Optional

APP_LOGGER_NAME = "omniconvo"

# uvicorn logs through these; they share the app handlers so one file holds
# both request lines and service events
SERVER_LOGGER_NAMES = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logger(
    name: str,
    log_level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    level = getattr(logging, log_level.upper(), logging.INFO)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def attach_server_loggers(logger: logging.Logger) -> None:
    """
    Route the ASGI server's loggers through the given logger's handlers.

    Replaces whatever handlers uvicorn installed and stops propagation,
    so each record is written once.

    Args:
        logger: Configured application logger
    """
    for name in SERVER_LOGGER_NAMES:
        server_logger = logging.getLogger(name)
        server_logger.handlers = list(logger.handlers)
        server_logger.setLevel(logger.level)
        server_logger.propagate = False


# Application logger instance
app_logger: Optional[logging.Logger] = None


def init_app_logger(settings) -> logging.Logger:
    """
    Initialize the application logger with settings.

    Args:
        settings: Application settings instance

    Returns:
        Configured application logger
    """
    global app_logger

    app_logger = setup_logger(
        name=APP_LOGGER_NAME,
        log_level=settings.log_level,
        log_file=settings.log_file or None
    )
    attach_server_loggers(app_logger)

    return app_logger


def get_app_logger() -> logging.Logger:
    """Get the application logger, configuring a console-only default if needed."""
    if app_logger is None:
        return setup_logger(APP_LOGGER_NAME)

    return app_logger
