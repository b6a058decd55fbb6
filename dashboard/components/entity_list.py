"""Normalization of the ``individual`` entity list.

Entries arrive either as bare identifiers or as ``{entity, name}`` records.
They are resolved once, here, into ``EntityRef`` so that nothing downstream
branches on the entry shape. Order is kept as given because the list index
decides where a satellite sits on the circle.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from schemas.power_flow import EntityRef
from services.common import get_logger
from utils.power_flow_config import IndividualEntityConfig, salvage_individual_record

logger = get_logger(__name__)

__all__ = ["normalize_entity", "normalize_individuals", "derive_display_name"]


def normalize_entity(entry: Any) -> EntityRef:
    if isinstance(entry, str):
        return EntityRef(identifier=entry)
    if isinstance(entry, IndividualEntityConfig):
        return EntityRef(identifier=entry.entity, display_name=entry.name)
    if isinstance(entry, Mapping):
        record = salvage_individual_record(entry)
        return EntityRef(identifier=record.entity, display_name=record.name)
    logger.debug("Unsupported individual entry %r", entry)
    return EntityRef()


def normalize_individuals(entries: Optional[Iterable[Any]]) -> Tuple[EntityRef, ...]:
    """Return one ``EntityRef`` per entry, in input order.

    ``None`` or an empty list gives an empty tuple. Duplicates are kept.
    """
    if not entries:
        return ()
    return tuple(normalize_entity(entry) for entry in entries)


def derive_display_name(identifier: Optional[str]) -> Optional[str]:
    """Human friendly name for an identifier without an explicit label.

    ``sensor.kitchen_light`` becomes ``kitchen light``. Only the second
    segment is used, so ``switch.garage.door_motor`` gives ``garage``.
    Identifiers without a ``.`` are used verbatim; anything that cannot be
    split is returned as is.
    """
    try:
        parts = identifier.split(".")
        if len(parts) < 2:
            return identifier
        return parts[1].replace("_", " ")
    except (AttributeError, TypeError):
        return identifier
