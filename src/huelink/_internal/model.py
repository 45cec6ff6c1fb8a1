"""Shared base for the bridge's resource records."""

from pydantic import BaseModel, ConfigDict


class HueModel(BaseModel):
    """Immutable record decoded from bridge JSON.

    Fields use Python names; the bridge's JSON keys are declared as aliases.
    Keys the record does not declare are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )


class OpenHueModel(HueModel):
    """A record that keeps undeclared keys as extra attributes."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="allow",
        protected_namespaces=(),
    )
