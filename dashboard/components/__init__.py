"""UI components for the power flow card."""

from .entity_list import derive_display_name, normalize_individuals
from .radial_layout import compute_placements, compute_radius, connector_for, connectors_for
from .power_flow_card import PowerFlowCard, compose_scene, format_reading
from .power_flow_figure import build_power_flow_figure

__all__ = [
    "derive_display_name",
    "normalize_individuals",
    "compute_placements",
    "compute_radius",
    "connector_for",
    "connectors_for",
    "PowerFlowCard",
    "compose_scene",
    "format_reading",
    "build_power_flow_figure",
]
