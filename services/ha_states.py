#!/usr/bin/env python3
"""
Lightweight Home Assistant state client + flattener.

- Fetches ``/api/states`` with a long-lived access token
- Flattens the state objects into ``entity_id -> state`` snapshots
"""
from __future__ import annotations

import sys
import os
import json
import argparse
from typing import Any, Dict, List, Optional

import requests

from services.common import get_logger
from utils.state_resolver import StateSnapshot, resolve_reading

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 5.0


def fetch_states(base_url: str, token: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> List[Dict[str, Any]]:
    url = base_url.rstrip("/") + "/api/states"
    headers = {"Content-Type": "application/json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    r = requests.get(url, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.json()


def flatten_states(payload: Any) -> Dict[str, Any]:
    """Map each ``entity_id`` to its raw ``state``; malformed items are skipped."""
    if not isinstance(payload, list):
        return {}
    states: Dict[str, Any] = {}
    for item in payload:
        if not isinstance(item, dict):
            continue
        entity_id = item.get("entity_id")
        if not entity_id:
            continue
        states[str(entity_id)] = item.get("state")
    return states


def load_snapshot(base_url: str, token: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT) -> StateSnapshot:
    """Fetch a snapshot; transport failures give an empty one.

    An empty snapshot renders every reading as a placeholder, which is how the
    card shows an unreachable host.
    """
    try:
        payload = fetch_states(base_url, token, timeout)
    except requests.exceptions.RequestException as exc:
        logger.warning("Could not fetch states from %s: %s", base_url, exc)
        return StateSnapshot()
    except ValueError as exc:
        logger.warning("State endpoint at %s returned invalid JSON: %s", base_url, exc)
        return StateSnapshot()
    return StateSnapshot(flatten_states(payload))


def main(argv: list[str]) -> int:
    ap = argparse.ArgumentParser(description="Fetch Home Assistant states and print resolved readings")
    ap.add_argument("entities", nargs="+", help="Entity ids, e.g. sensor.home_power")
    ap.add_argument("--url", default=os.getenv("HA_URL", "http://homeassistant.local:8123"), help="Home Assistant base URL")
    ap.add_argument("--token", default=os.getenv("HA_TOKEN"), help="Long-lived access token")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    args = ap.parse_args(argv)
    snapshot = load_snapshot(args.url, args.token, args.timeout)
    readings = {eid: resolve_reading(snapshot, eid) for eid in args.entities}
    print(json.dumps({"url": args.url, "readings": readings}, separators=(",", ":")))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
