"""Group records returned by the bridge."""

from pydantic import Field

from huelink._internal.model import HueModel


class GroupState(HueModel):
    # all_on: every light in the group is on; any_on: at least one is
    is_all_on: bool = Field(alias="all_on")
    is_any_on: bool = Field(alias="any_on")


class GroupAction(HueModel):
    """The light state last applied to the whole group."""

    is_on: bool = Field(alias="on")
    brightness: int | None = Field(default=None, alias="bri")


class Group(HueModel):
    """A group of lights tracked by the bridge

    ``type`` is "LightGroup" unless set on creation; other values are
    "Room", "Zone", "Luminaire" and "LightSource".
    """

    name: str
    type: str
    lights: list[str]
    sensors: list[str] = Field(default_factory=list)
    state: GroupState
    action: GroupAction | None = None

    def __repr__(self) -> str:
        return f'<{self.__class__.__module__}.{self.__class__.__name__} name="{self.name}" lights={self.lights}>'
