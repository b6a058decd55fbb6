"""Pydantic schemas for the power flow card's layout and scene."""

from .power_flow import (
    DEFAULT_MAX_RADIUS,
    DEFAULT_MIN_RADIUS,
    CenterHub,
    Connector,
    EntityRef,
    LayoutParameters,
    MoreInfoEvent,
    Placement,
    PowerFlowScene,
    SatelliteNode,
    SummaryField,
)

__all__ = (
    "DEFAULT_MAX_RADIUS",
    "DEFAULT_MIN_RADIUS",
    "CenterHub",
    "Connector",
    "EntityRef",
    "LayoutParameters",
    "MoreInfoEvent",
    "Placement",
    "PowerFlowScene",
    "SatelliteNode",
    "SummaryField",
)
