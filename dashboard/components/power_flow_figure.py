from __future__ import annotations

import plotly.graph_objects as go

from schemas.power_flow import CENTER_X, CENTER_Y, PowerFlowScene

__all__ = ["COL", "HUB_RADIUS", "build_power_flow_figure"]

COL = {
    "grid": "#F44336",
    "solar": "#FFB300",
    "battery": "#4CAF50",
    "home": "#3B82F6",
    "connector": "rgba(229, 231, 235, 0.5)",
    "hub_fill": "rgba(148, 163, 184, 0.12)",
    "node": "#22D3EE",
    "node_idle": "#374151",
    "text": "#E5E7EB",
    "muted": "#9CA3AF",
}

# Hub circle radius in percent units.
HUB_RADIUS = 11.0


def build_power_flow_figure(scene: PowerFlowScene, *, height: int = 360) -> go.Figure:
    """Paint ``scene`` on a 100x100 percent canvas.

    Connectors are shapes below the data, the hub is a circle with its reading
    as annotation, and satellites form one ``markers+text`` trace whose
    ``customdata`` carries the identifier for click routing.
    """
    fig = go.Figure()

    for c in scene.connectors:
        fig.add_shape(type="line", x0=c.x1, y0=c.y1, x1=c.x2, y1=c.y2,
                      line=dict(color=COL["connector"], width=1.5), layer="below")

    fig.add_shape(type="circle", layer="below",
                  x0=CENTER_X - HUB_RADIUS, x1=CENTER_X + HUB_RADIUS,
                  y0=CENTER_Y - HUB_RADIUS, y1=CENTER_Y + HUB_RADIUS,
                  line=dict(color=COL["home"], width=2), fillcolor=COL["hub_fill"])
    fig.add_annotation(x=CENTER_X, y=CENTER_Y, text=f"<b>{scene.hub.display}</b>", showarrow=False,
                       font=dict(size=16, color=COL["text"]), hovertext=scene.hub.title)

    if scene.satellites:
        nodes = scene.satellites
        fig.add_trace(
            go.Scatter(
                x=[n.placement.x for n in nodes],
                y=[n.placement.y for n in nodes],
                mode="markers+text",
                text=[f"<b>{n.label}</b><br>{n.display}" for n in nodes],
                textposition="middle center",
                textfont=dict(size=11, color=COL["text"]),
                marker=dict(
                    size=46,
                    color=[COL["node"] if n.value is not None else COL["node_idle"] for n in nodes],
                    opacity=0.35,
                    line=dict(color=COL["node"], width=1),
                ),
                customdata=[n.identifier or "" for n in nodes],
                hovertemplate="%{customdata}<extra></extra>",
                showlegend=False,
                name="individual",
            )
        )

    fig.update_xaxes(range=[0, 100], visible=False, fixedrange=True)
    # Percent space grows downward like the page it overlays.
    fig.update_yaxes(range=[100, 0], visible=False, fixedrange=True, scaleanchor="x", scaleratio=1)
    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        height=height,
        dragmode=False,
    )
    return fig
