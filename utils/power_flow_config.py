"""Pydantic models for the power flow card configuration.

The configuration mirrors the Lovelace card layout::

    title: My house
    clickable_entities: true
    entities:
      grid: {entity: sensor.grid_power}
      solar: {entity: sensor.solar_power}
      battery: {entity: sensor.battery_power}
      home: {entity: sensor.home_power, hide: false}
      individual:
        - sensor.heat_pump_power
        - {entity: sensor.ev_charger_power, name: EV}
    individual_min_radius: 20
    individual_max_radius: 45

Only ``entities`` is required. Everything under it is optional.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from schemas.power_flow import DEFAULT_MAX_RADIUS, DEFAULT_MIN_RADIUS, LayoutParameters
from services.common import get_logger

logger = get_logger(__name__)

SUMMARY_KINDS = ("grid", "solar", "battery", "home")
DEFAULT_TITLE = "Power Flow Card Plus"
DEFAULT_CONFIG_PATH = "config/power_flow.yaml"


class ConfigError(ValueError):
    """Raised when the card configuration cannot be used."""


class SummaryEntityConfig(BaseModel):
    """Entity backing one of the summary fields."""

    entity: Optional[str] = Field(None, description="Identifier in the state store")
    hide: bool = Field(False, description="Leave the home field out of the top row")


class IndividualEntityConfig(BaseModel):
    """Labelled entry of the ``individual`` list."""

    entity: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("entity", "identifier"),
        description="Identifier in the state store",
    )
    name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("name", "label"),
        description="Label shown instead of the derived one",
    )


IndividualEntry = Union[str, IndividualEntityConfig]


def salvage_individual_record(record: Mapping[str, Any]) -> IndividualEntityConfig:
    """Validate ``record``, dropping only the fields that have the wrong type.

    ``{entity: sensor.a, name: 5}`` keeps ``sensor.a`` and loses the name.
    """
    try:
        return IndividualEntityConfig.model_validate(dict(record))
    except ValidationError as exc:
        logger.warning("Dropping invalid fields of individual entity %r: %s", record, exc)
    kept = {}
    for name, field in IndividualEntityConfig.model_fields.items():
        for key in field.validation_alias.choices:
            if isinstance(record.get(key), str):
                kept[name] = record[key]
                break
    return IndividualEntityConfig.model_validate(kept)


def _lenient_entry(entry: Any) -> IndividualEntry:
    """Keep usable entries; anything else becomes an entry without identifier."""

    if isinstance(entry, (str, IndividualEntityConfig)):
        return entry
    if isinstance(entry, Mapping):
        return salvage_individual_record(entry)
    logger.warning("Malformed individual entity entry: %r", entry)
    return IndividualEntityConfig()


class EntitiesConfig(BaseModel):
    grid: Optional[SummaryEntityConfig] = None
    solar: Optional[SummaryEntityConfig] = None
    battery: Optional[SummaryEntityConfig] = None
    home: Optional[SummaryEntityConfig] = None
    individual: List[IndividualEntry] = Field(default_factory=list)

    @field_validator("grid", "solar", "battery", "home", mode="before")
    @classmethod
    def _accept_bare_identifier(cls, v: Any) -> Any:
        """Allow ``grid: sensor.grid_power`` as shorthand."""

        if isinstance(v, str):
            return {"entity": v}
        return v

    @field_validator("individual", mode="before")
    @classmethod
    def _coerce_individual(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            logger.warning("Ignoring non-list individual entities: %r", v)
            return []
        return [_lenient_entry(entry) for entry in v]

    def summary(self, kind: str) -> Optional[SummaryEntityConfig]:
        return getattr(self, kind)

    def identifier(self, kind: str) -> Optional[str]:
        entry = self.summary(kind)
        return entry.entity if entry is not None else None

    def is_hidden(self, kind: str) -> bool:
        """Only the home field can be hidden; ``hide`` elsewhere is ignored."""
        if kind != "home":
            return False
        entry = self.summary(kind)
        return bool(entry is not None and entry.hide)


class PowerFlowCardConfig(BaseModel):
    """Top-level card configuration."""

    title: Optional[str] = None
    clickable_entities: bool = False
    entities: EntitiesConfig
    individual_min_radius: float = Field(
        DEFAULT_MIN_RADIUS, description="Satellite radius for a single entity, in percent"
    )
    individual_max_radius: float = Field(
        DEFAULT_MAX_RADIUS, description="Upper bound of the satellite radius, in percent"
    )

    @field_validator("individual_min_radius", "individual_max_radius", mode="before")
    @classmethod
    def _default_when_null(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return DEFAULT_MIN_RADIUS if info.field_name == "individual_min_radius" else DEFAULT_MAX_RADIUS
        return v

    @model_validator(mode="after")
    def _check_radius_bounds(self) -> "PowerFlowCardConfig":
        if self.individual_min_radius < 0:
            raise ValueError("individual_min_radius must be non-negative")
        if self.individual_min_radius > self.individual_max_radius:
            raise ValueError("individual_min_radius must not exceed individual_max_radius")
        return self

    @property
    def display_title(self) -> str:
        return self.title if self.title is not None else DEFAULT_TITLE

    def layout_parameters(self) -> LayoutParameters:
        return LayoutParameters(
            min_radius=self.individual_min_radius,
            max_radius=self.individual_max_radius,
        )


def parse_power_flow_config(data: Mapping[str, Any] | None) -> PowerFlowCardConfig:
    """Validate an in-memory configuration mapping."""

    if not isinstance(data, Mapping) or data.get("entities") is None:
        raise ConfigError("You must define entities in the config")
    try:
        return PowerFlowCardConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid power flow configuration: {exc}") from exc


def load_power_flow_config(path: str | Path = DEFAULT_CONFIG_PATH) -> PowerFlowCardConfig:
    """Load and validate the card configuration from a YAML file."""

    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Could not parse {path}: {exc}") from exc

    logger.debug("Loaded power flow configuration from %s", path)
    return parse_power_flow_config(data)


__all__ = [
    "ConfigError",
    "SummaryEntityConfig",
    "IndividualEntityConfig",
    "salvage_individual_record",
    "EntitiesConfig",
    "PowerFlowCardConfig",
    "SUMMARY_KINDS",
    "DEFAULT_TITLE",
    "parse_power_flow_config",
    "load_power_flow_config",
]
