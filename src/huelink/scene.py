"""Scene records returned by the bridge."""

from typing import Any

from pydantic import Field

from huelink._internal.model import HueModel


class Scene(HueModel):
    """Container for Scene

    ``type`` is "LightScene" (default) or "GroupScene", whose lights follow
    the membership of ``group``. ``picture`` is only present when a single
    scene is fetched.
    """

    name: str
    type: str = "LightScene"
    group: str | None = None
    lights: list[str] = Field(default_factory=list)
    owner: str
    recycle: bool
    locked: bool
    picture: str | None = None
    appdata: dict[str, Any] = Field(default_factory=dict)
    last_updated: str | None = Field(default=None, alias="lastupdated")
    version: int | None = None

    def __repr__(self) -> str:
        # like default python repr function, but add scene name
        return f'<{self.__class__.__module__}.{self.__class__.__name__} name="{self.name}" lights={self.lights}>'
