import plotly.graph_objects as go

from dashboard.components.power_flow_card import compose_scene
from dashboard.components.power_flow_figure import build_power_flow_figure
from utils.power_flow_config import parse_power_flow_config


def _scene(card_config, states, individual):
    card_config["entities"]["individual"] = individual
    return compose_scene(parse_power_flow_config(card_config), states)


def test_empty_scene_draws_only_hub(card_config, states):
    fig = build_power_flow_figure(_scene(card_config, states, []))
    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 0
    assert [s.type for s in fig.layout.shapes] == ["circle"]
    assert "483 W" in fig.layout.annotations[0].text


def test_satellites_and_connectors(card_config, states):
    scene = _scene(card_config, states, ["sensor.kitchen_light", "sensor.a", "sensor.b"])
    fig = build_power_flow_figure(scene, height=300)

    lines = [s for s in fig.layout.shapes if s.type == "line"]
    assert len(lines) == 3
    assert all((s.x0, s.y0) == (50, 50) for s in lines)

    (trace,) = fig.data
    assert list(trace.customdata) == ["sensor.kitchen_light", "sensor.a", "sensor.b"]
    assert list(trace.x) == [n.placement.x for n in scene.satellites]
    assert "kitchen light" in trace.text[0]
    assert fig.layout.height == 300


def test_axes_cover_percent_space(card_config, states):
    fig = build_power_flow_figure(_scene(card_config, states, ["sensor.a"]))
    assert tuple(fig.layout.xaxis.range) == (0, 100)
    assert tuple(fig.layout.yaxis.range) == (100, 0)
