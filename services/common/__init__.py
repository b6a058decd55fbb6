"""Shared helpers for the card's service layer: logging setup."""

from .logging_utils import configure_logging, get_logger, quiet_loggers

__all__ = ["configure_logging", "get_logger", "quiet_loggers"]
