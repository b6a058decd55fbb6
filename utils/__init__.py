"""Utility helpers for the power flow card."""

from __future__ import annotations

from .power_flow_config import (
    ConfigError,
    PowerFlowCardConfig,
    load_power_flow_config,
    parse_power_flow_config,
)
from .state_resolver import StateSnapshot, resolve_reading

__all__ = [
    "ConfigError",
    "PowerFlowCardConfig",
    "load_power_flow_config",
    "parse_power_flow_config",
    "StateSnapshot",
    "resolve_reading",
]
