"""Read-only access to live readings.

Every render pass receives a ``StateSnapshot`` built by the host. The card
never talks to the state store directly, so a pass is a pure function of its
config and snapshot.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

# Longest leading decimal number, as in "12.5 W" or "1e3xyz".
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class StateSnapshot(Mapping):
    """Immutable ``identifier -> raw state`` mapping."""

    __slots__ = ("_states",)

    def __init__(self, states: Mapping[str, Any] | None = None):
        self._states: Dict[str, Any] = dict(states or {})

    def __getitem__(self, identifier: str) -> Any:
        return self._states[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return f"StateSnapshot({len(self._states)} states)"


def parse_reading(raw: Any) -> Optional[float]:
    """Return ``raw`` as a finite float, or None when it is not one.

    Strings are read up to the end of their leading number, so ``"12 W"``
    gives 12. Home Assistant reports gaps as ``"unavailable"`` or
    ``"unknown"``; those, empty strings and non-finite or out-of-range numbers
    all come back as None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    try:
        if isinstance(raw, (int, float)):
            value = float(raw)
        else:
            match = _LEADING_NUMBER.match(str(raw))
            if match is None:
                return None
            value = float(match.group().strip())
    except (OverflowError, ValueError):
        return None
    return value if math.isfinite(value) else None


def resolve_reading(snapshot: Mapping[str, Any] | None, identifier: Optional[str]) -> Optional[float]:
    """Resolve ``identifier`` to a number; None marks a resolution gap."""
    if not identifier or snapshot is None:
        return None
    if identifier not in snapshot:
        return None
    return parse_reading(snapshot[identifier])


__all__ = ["StateSnapshot", "parse_reading", "resolve_reading"]
