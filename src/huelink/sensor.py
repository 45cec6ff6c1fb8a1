"""Sensor records returned by the bridge."""

from pydantic import Field

from huelink._internal.model import HueModel, OpenHueModel


class SensorState(OpenHueModel):
    """State of a sensor.

    The keys depend on the sensor type; only CLIP generic flag sensors report
    ``flag``. Everything else (``buttonevent``, ``presence``, ``lastupdated``
    and so on) is kept as an extra attribute.
    """

    flag: bool | None = None


class SensorConfig(HueModel):
    is_on: bool = Field(alias="on")
    is_configured: bool | None = Field(default=None, alias="configured")
    is_reachable: bool | None = Field(default=None, alias="reachable")


class Sensor(HueModel):
    name: str
    type: str
    model_id: str = Field(alias="modelid")
    manufacturer_name: str = Field(alias="manufacturername")
    state: SensorState
    config: SensorConfig

    def __repr__(self) -> str:
        return f'<{self.__class__.__module__}.{self.__class__.__name__} name="{self.name}" type="{self.type}">'
