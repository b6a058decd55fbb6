#!/usr/bin/env python3
"""Render a power flow scene outside of Streamlit.

Loads the card configuration, takes states either from a JSON file (the
``/api/states`` payload or a plain ``{entity_id: state}`` mapping) or from a
live Home Assistant instance, and prints the scene as JSON. With ``--html``
the Plotly figure is written to a standalone HTML file as well.

Examples
--------
python scripts/render_power_flow.py --config config/power_flow.yaml \
       --states states.json --html power_flow.html
python scripts/render_power_flow.py --url http://homeassistant.local:8123 --token $HA_TOKEN
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from dashboard.components.power_flow_card import PowerFlowCard
from dashboard.components.power_flow_figure import build_power_flow_figure
from services.common import get_logger
from services.ha_states import flatten_states, load_snapshot
from utils.power_flow_config import ConfigError, DEFAULT_CONFIG_PATH, load_power_flow_config
from utils.state_resolver import StateSnapshot

logger = get_logger(__name__)


def read_states_file(path: str | Path) -> Dict[str, Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, list):
        return flatten_states(data)
    if isinstance(data, dict):
        return data
    raise ValueError(f"Unsupported states file layout in {path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--config", default=os.getenv("POWER_FLOW_CONFIG", DEFAULT_CONFIG_PATH))
    ap.add_argument("--states", help="JSON file with states")
    ap.add_argument("--url", default=os.getenv("HA_URL"), help="Home Assistant base URL")
    ap.add_argument("--token", default=os.getenv("HA_TOKEN"))
    ap.add_argument("--html", help="Write the figure to this HTML file")
    args = ap.parse_args(argv)

    card = PowerFlowCard()
    try:
        card.set_config(load_power_flow_config(args.config))
    except ConfigError as exc:
        logger.error("%s", exc)
        return 2

    if args.states:
        snapshot = StateSnapshot(read_states_file(args.states))
    elif args.url:
        snapshot = load_snapshot(args.url, args.token)
    else:
        snapshot = StateSnapshot()

    scene = card.render(snapshot)
    print(scene.model_dump_json(indent=2))
    if args.html:
        build_power_flow_figure(scene).write_html(args.html, include_plotlyjs="cdn")
        logger.info("Wrote %s", args.html)
    return 0


if __name__ == "__main__":
    sys.exit(main())
