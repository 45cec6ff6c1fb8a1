"""Schedule records returned by the bridge."""

from pydantic import Field

from huelink._internal.model import HueModel


class ScheduleCommandBody(HueModel):
    scene: str | None = None
    transition_time: float | None = Field(default=None, alias="transitiontime")
    brightness_increment: float | None = Field(default=None, alias="bri_inc")


class ScheduleCommand(HueModel):
    """The request the bridge issues when the schedule fires.

    ``address`` includes the "/api/<username>/" prefix.
    """

    address: str
    method: str
    body: ScheduleCommandBody


class Schedule(HueModel):
    """A timed command stored on the bridge.

    ``time`` is UTC and deprecated by the bridge in favour of ``local_time``;
    both are returned for backwards compatibility.
    """

    name: str
    description: str
    time: str
    created: str
    status: str
    command: ScheduleCommand
    recycle: bool
    local_time: str = Field(alias="localtime")
