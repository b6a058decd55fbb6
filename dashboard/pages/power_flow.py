import os
from typing import Any, Dict

import streamlit as st

from dashboard.components.power_flow_card import PowerFlowCard
from dashboard.components.power_flow_panel import render_power_flow_panel
from schemas.power_flow import MoreInfoEvent
from services.common import get_logger
from services.ha_states import load_snapshot
from utils.power_flow_config import ConfigError, DEFAULT_CONFIG_PATH, load_power_flow_config
from utils.state_resolver import StateSnapshot

logger = get_logger(__name__)

MORE_INFO_KEY = "power_flow_more_info"


@st.cache_data(ttl=5)
def get_states(base_url: str, token: str) -> Dict[str, Any]:
    """Fetch the current states; an empty dict when Home Assistant is unreachable."""
    return dict(load_snapshot(base_url, token or None))


def _remember_more_info(event: MoreInfoEvent) -> None:
    st.session_state[MORE_INFO_KEY] = event.identifier


def main() -> None:
    st.set_page_config(page_title="Power Flow", page_icon="⚡", layout="wide")

    config_path = os.getenv("POWER_FLOW_CONFIG", DEFAULT_CONFIG_PATH)
    card = PowerFlowCard(on_more_info=_remember_more_info)
    try:
        card.set_config(load_power_flow_config(config_path))
    except ConfigError as exc:
        logger.error("Power flow card setup failed: %s", exc)
        st.error(str(exc))
        st.stop()

    base_url = os.getenv("HA_URL", "http://homeassistant.local:8123")
    token = os.getenv("HA_TOKEN", "")
    snapshot = StateSnapshot(get_states(base_url, token))
    if not snapshot:
        st.caption(f"No states available from {base_url}")

    render_power_flow_panel(card, card.render(snapshot))

    selected = st.session_state.get(MORE_INFO_KEY)
    if selected:
        with st.expander(f"Details: {selected}", expanded=True):
            st.json({"entity_id": selected, "state": snapshot.get(selected)})


main()
