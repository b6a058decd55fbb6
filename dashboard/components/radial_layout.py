"""Closed-form radial placement of satellite nodes.

Satellites sit on one circle around the hub at (50, 50) in a 100x100 percent
space. The circle grows with the satellite count: logarithmically up to eight
entries, with a small linear bonus per extra entry, and never beyond
``max_radius``. Angles start at 12 o'clock and proceed clockwise in list order.

Screen convention: y grows downward, so ``x = 50 + r*cos(a)`` and
``y = 50 + r*sin(a)`` put ``a = -pi/2`` straight above the hub. The Lovelace
card this follows computes ``left = 50 + r*sin(a)``, ``top = 50 - r*cos(a)``
from the same start angle, which lands index 0 at 9 o'clock instead.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Tuple

from schemas.power_flow import CENTER_X, CENTER_Y, Connector, LayoutParameters, Placement

__all__ = [
    "START_ANGLE",
    "compute_radius",
    "layout_angles",
    "compute_placements",
    "connector_for",
    "connectors_for",
]

START_ANGLE = -math.pi / 2

# Radius growth: 12% per decade of count, plus 0.6% per satellite past eight.
_LOG_GAIN = 12.0
_CROWD_THRESHOLD = 8
_CROWD_GAIN = 0.6


def compute_radius(count: int, params: Optional[LayoutParameters] = None) -> float:
    """Shared radius for ``count`` satellites, clamped to ``params.max_radius``."""
    params = params or LayoutParameters()
    grown = (
        params.min_radius
        + math.log10(max(1, count)) * _LOG_GAIN
        + max(0.0, (count - _CROWD_THRESHOLD) * _CROWD_GAIN)
    )
    return min(params.max_radius, grown)


def layout_angles(count: int) -> Tuple[float, ...]:
    if count <= 0:
        return ()
    step = 2 * math.pi / count
    return tuple(START_ANGLE + step * index for index in range(count))


def compute_placements(count: int, params: Optional[LayoutParameters] = None) -> Tuple[Placement, ...]:
    """Place ``count`` satellites evenly on the shared circle.

    Pure: identical ``(count, params)`` always gives identical placements.
    A count of zero (or less) yields no placements.
    """
    if count <= 0:
        return ()
    radius = compute_radius(count, params)
    return tuple(
        Placement(
            index=index,
            angle=angle,
            x=CENTER_X + radius * math.cos(angle),
            y=CENTER_Y + radius * math.sin(angle),
        )
        for index, angle in enumerate(layout_angles(count))
    )


def connector_for(placement: Placement) -> Connector:
    return Connector(x1=CENTER_X, y1=CENTER_Y, x2=placement.x, y2=placement.y)


def connectors_for(placements: Iterable[Placement]) -> Tuple[Connector, ...]:
    return tuple(connector_for(p) for p in placements)
