from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Canonical radius bounds, in percent of the drawing area.
DEFAULT_MIN_RADIUS = 20.0
DEFAULT_MAX_RADIUS = 45.0

CENTER_X = 50.0
CENTER_Y = 50.0


class EntityRef(BaseModel):
    """One normalized entry of the ``individual`` list."""

    model_config = ConfigDict(frozen=True)

    identifier: Optional[str] = Field(
        None, description="Key into the state snapshot; None for malformed entries"
    )
    display_name: Optional[str] = Field(
        None, description="Explicit label from configuration"
    )


class LayoutParameters(BaseModel):
    """Radius bounds for satellite placement."""

    model_config = ConfigDict(frozen=True)

    min_radius: float = Field(DEFAULT_MIN_RADIUS, description="Radius used for a single satellite")
    max_radius: float = Field(DEFAULT_MAX_RADIUS, description="Upper clamp for the shared radius")

    @model_validator(mode="after")
    def _check_bounds(self) -> "LayoutParameters":
        if self.min_radius < 0:
            raise ValueError("min_radius must be non-negative")
        if self.min_radius > self.max_radius:
            raise ValueError("min_radius must not exceed max_radius")
        return self


class Placement(BaseModel):
    """Resolved position of a satellite for one render pass."""

    model_config = ConfigDict(frozen=True)

    index: int
    angle: float = Field(..., description="Angle in radians, -pi/2 is 12 o'clock")
    x: float = Field(..., description="Horizontal position in percent")
    y: float = Field(..., description="Vertical position in percent, growing downward")


class Connector(BaseModel):
    """Line segment from the hub to a satellite."""

    model_config = ConfigDict(frozen=True)

    x1: float = CENTER_X
    y1: float = CENTER_Y
    x2: float
    y2: float


class SummaryField(BaseModel):
    """Top-row reading for one of grid/solar/battery/home."""

    model_config = ConfigDict(frozen=True)

    kind: str
    label: str
    identifier: Optional[str] = None
    value: Optional[float] = None
    display: str
    clickable: bool = False


class CenterHub(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = "Home"
    identifier: Optional[str] = None
    value: Optional[float] = None
    display: str


class SatelliteNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    identifier: Optional[str] = None
    label: str
    value: Optional[float] = None
    display: str
    placement: Placement
    clickable: bool = False


class PowerFlowScene(BaseModel):
    """Declarative description of one rendered card."""

    model_config = ConfigDict(frozen=True)

    title: str
    summary_fields: Tuple[SummaryField, ...] = ()
    hub: CenterHub
    satellites: Tuple[SatelliteNode, ...] = ()
    connectors: Tuple[Connector, ...] = ()
    radius: Optional[float] = Field(
        None, description="Shared satellite radius; None when there are no satellites"
    )
    legend: Tuple[str, ...] = ()


class MoreInfoEvent(BaseModel):
    """Request for the host to show details for ``identifier``."""

    model_config = ConfigDict(frozen=True)

    identifier: str


__all__ = [
    "DEFAULT_MIN_RADIUS",
    "DEFAULT_MAX_RADIUS",
    "CENTER_X",
    "CENTER_Y",
    "EntityRef",
    "LayoutParameters",
    "Placement",
    "Connector",
    "SummaryField",
    "CenterHub",
    "SatelliteNode",
    "PowerFlowScene",
    "MoreInfoEvent",
]
