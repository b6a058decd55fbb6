"""Scene composition for the power flow card.

``compose_scene`` turns a validated config plus a state snapshot into a
``PowerFlowScene``: the summary row, the home hub, and the satellites with
their connectors. ``PowerFlowCard`` wraps it with the card lifecycle the
dashboard host expects (config, render, click activation).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from schemas.power_flow import (
    CenterHub,
    EntityRef,
    MoreInfoEvent,
    PowerFlowScene,
    SatelliteNode,
    SummaryField,
)
from services.common import get_logger
from utils.power_flow_config import (
    SUMMARY_KINDS,
    ConfigError,
    PowerFlowCardConfig,
    parse_power_flow_config,
)
from utils.state_resolver import resolve_reading

from .entity_list import derive_display_name, normalize_individuals
from .radial_layout import compute_placements, compute_radius, connectors_for

logger = get_logger(__name__)

PLACEHOLDER = "–"
UNIT = "W"
LEGEND = ("grid", "solar", "battery")

MoreInfoHandler = Callable[[MoreInfoEvent], None]


def format_reading(value: Optional[float], unit: str = UNIT) -> str:
    """``482.7 -> "483 W"``; None gives the placeholder dash.

    Halves round up (``2.5 -> 3``, ``-2.5 -> -2``).
    """
    if value is None:
        return PLACEHOLDER
    return f"{math.floor(value + 0.5)} {unit}"


def summary_label(kind: str) -> str:
    return kind[:1].upper() + kind[1:]


def build_summary_fields(
    config: PowerFlowCardConfig, snapshot: Mapping[str, Any]
) -> Tuple[SummaryField, ...]:
    fields = []
    for kind in SUMMARY_KINDS:
        if config.entities.is_hidden(kind):
            continue
        identifier = config.entities.identifier(kind)
        value = resolve_reading(snapshot, identifier)
        fields.append(
            SummaryField(
                kind=kind,
                label=summary_label(kind),
                identifier=identifier,
                value=value,
                display=format_reading(value),
                clickable=bool(config.clickable_entities and identifier),
            )
        )
    return tuple(fields)


def build_hub(config: PowerFlowCardConfig, snapshot: Mapping[str, Any]) -> CenterHub:
    identifier = config.entities.identifier("home")
    value = resolve_reading(snapshot, identifier)
    return CenterHub(identifier=identifier, value=value, display=format_reading(value))


def satellite_label(ref: EntityRef) -> str:
    if ref.display_name is not None:
        return ref.display_name
    return derive_display_name(ref.identifier) or ""


def build_satellites(
    refs: Sequence[EntityRef],
    config: PowerFlowCardConfig,
    snapshot: Mapping[str, Any],
) -> Tuple[SatelliteNode, ...]:
    placements = compute_placements(len(refs), config.layout_parameters())
    nodes = []
    for ref, placement in zip(refs, placements):
        value = resolve_reading(snapshot, ref.identifier)
        nodes.append(
            SatelliteNode(
                index=placement.index,
                identifier=ref.identifier,
                label=satellite_label(ref),
                value=value,
                display=format_reading(value),
                placement=placement,
                clickable=bool(config.clickable_entities and ref.identifier),
            )
        )
    return tuple(nodes)


def compose_scene(config: PowerFlowCardConfig, snapshot: Mapping[str, Any] | None) -> PowerFlowScene:
    """Build the full scene for one render pass."""
    snapshot = snapshot if snapshot is not None else {}
    refs = normalize_individuals(config.entities.individual)
    satellites = build_satellites(refs, config, snapshot)
    radius = compute_radius(len(refs), config.layout_parameters()) if refs else None
    logger.debug("Composed scene with %d satellites (radius=%s)", len(satellites), radius)
    return PowerFlowScene(
        title=config.display_title,
        summary_fields=build_summary_fields(config, snapshot),
        hub=build_hub(config, snapshot),
        satellites=satellites,
        connectors=connectors_for(node.placement for node in satellites),
        radius=radius,
        legend=LEGEND,
    )


class PowerFlowCard:
    """Card lifecycle: configure once, render per state change, emit clicks."""

    def __init__(self, on_more_info: Optional[MoreInfoHandler] = None):
        self._config: Optional[PowerFlowCardConfig] = None
        self._on_more_info = on_more_info

    @property
    def config(self) -> Optional[PowerFlowCardConfig]:
        return self._config

    def set_config(self, config: Mapping[str, Any] | PowerFlowCardConfig) -> PowerFlowCardConfig:
        """Validate and store ``config``; raises ``ConfigError`` when unusable."""
        if isinstance(config, PowerFlowCardConfig):
            self._config = config
        else:
            self._config = parse_power_flow_config(config)
        return self._config

    def render(self, snapshot: Mapping[str, Any] | None) -> PowerFlowScene:
        if self._config is None:
            raise ConfigError("Card rendered before set_config")
        return compose_scene(self._config, snapshot)

    def activate(self, identifier: Optional[str]) -> Optional[MoreInfoEvent]:
        """Handle a click on a field or satellite.

        Returns the emitted event, or None when interaction is disabled or the
        node has no identifier.
        """
        if self._config is None or not self._config.clickable_entities or not identifier:
            return None
        event = MoreInfoEvent(identifier=identifier)
        if self._on_more_info is not None:
            self._on_more_info(event)
        return event

    @staticmethod
    def get_stub_config() -> Dict[str, Any]:
        return {
            "title": "Power Flow Card Plus (unlimited)",
            "entities": {
                "grid": {"entity": "sensor.grid_power"},
                "solar": {"entity": "sensor.solar_power"},
                "battery": {"entity": "sensor.battery_power"},
                "home": {"entity": "sensor.home_power"},
                "individual": [],
            },
        }

    @staticmethod
    def card_size() -> int:
        return 3


__all__ = [
    "PLACEHOLDER",
    "UNIT",
    "LEGEND",
    "format_reading",
    "summary_label",
    "build_summary_fields",
    "build_hub",
    "build_satellites",
    "compose_scene",
    "PowerFlowCard",
]
