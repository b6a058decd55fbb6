"""Streamlit rendering of a composed power flow scene."""

from typing import Sequence

import streamlit as st

from schemas.power_flow import PowerFlowScene, SatelliteNode

from .power_flow_card import PowerFlowCard
from .power_flow_figure import COL, build_power_flow_figure

BUTTONS_PER_ROW = 4


def _legend_html(kinds: Sequence[str]) -> str:
    items = [
        f"<span style='display:inline-flex;align-items:center;gap:6px;margin-right:14px;color:{COL['muted']};font-size:0.85rem;'>"
        f"<span style='width:10px;height:10px;border-radius:50%;background:{COL.get(kind, COL['muted'])};display:inline-block;'></span>"
        f"{kind.title()}</span>"
        for kind in kinds
    ]
    return "<div>" + "".join(items) + "</div>"


def _satellite_buttons(card: PowerFlowCard, nodes: Sequence[SatelliteNode]) -> None:
    clickable = [n for n in nodes if n.clickable]
    for start in range(0, len(clickable), BUTTONS_PER_ROW):
        row = clickable[start:start + BUTTONS_PER_ROW]
        cols = st.columns(BUTTONS_PER_ROW)
        for col, node in zip(cols, row):
            if col.button(node.label or node.identifier, key=f"pf_sat_{node.index}", use_container_width=True):
                card.activate(node.identifier)


def render_power_flow_panel(card: PowerFlowCard, scene: PowerFlowScene, *, height: int = 360) -> None:
    """Render the summary row, the radial figure and the legend."""

    st.subheader(scene.title)

    fields = scene.summary_fields
    cols = st.columns(len(fields) if fields else 1)
    for col, field in zip(cols, fields):
        with col:
            st.metric(field.label, field.display)
            st.caption(field.identifier or "")
            if field.clickable and st.button("Details", key=f"pf_field_{field.kind}"):
                card.activate(field.identifier)

    st.plotly_chart(
        build_power_flow_figure(scene, height=height),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    _satellite_buttons(card, scene.satellites)
    st.markdown(_legend_html(scene.legend), unsafe_allow_html=True)


__all__ = ["render_power_flow_panel"]
