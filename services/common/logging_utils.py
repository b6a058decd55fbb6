"""Logging setup for the card, the state client and the dashboard page.

Modules ask for ``get_logger(__name__)``; the first request configures the
root logger unless the host (Streamlit, pytest) has already installed
handlers. The state page polls Home Assistant every few seconds, so the HTTP
stack is held at WARNING unless ``POWER_FLOW_LOG_HTTP`` is set.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Iterable, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
NOISY_LOGGERS = ("urllib3", "requests", "watchdog")


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.getenv("POWER_FLOW_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    resolved = logging.getLevelName(str(name).upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def quiet_loggers(names: Iterable[str] = NOISY_LOGGERS, level: int = logging.WARNING) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging(level: Optional[str] = None) -> None:
    """Install a stderr handler on the root logger.

    ``level`` wins over ``POWER_FLOW_LOG_LEVEL`` and ``LOG_LEVEL``; unknown
    names fall back to INFO.
    """
    logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT, stream=sys.stderr)
    if not os.getenv("POWER_FLOW_LOG_HTTP"):
        quiet_loggers()


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "configure_logging", "get_logger", "quiet_loggers"]
