"""Utilities package."""

from .logger import get_app_logger, setup_logger, init_app_logger, attach_server_loggers

__all__ = [
    "get_app_logger",
    "setup_logger",
    "init_app_logger",
    "attach_server_loggers",
]
