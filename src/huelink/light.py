"""Light records returned by the bridge."""

from pydantic import Field

from huelink._internal.model import HueModel, OpenHueModel


class LightState(HueModel):
    """Current state of a light."""

    is_on: bool = Field(alias="on")
    is_reachable: bool = Field(alias="reachable")
    # 1 (dimmest the light can go) to 254 (brightest)
    brightness: int = Field(alias="bri")


class LightControl(HueModel):
    min_dim_level: int | None = Field(default=None, alias="mindimlevel")
    max_lumen: int | None = Field(default=None, alias="maxlumen")


class LightCapabilities(HueModel):
    is_certified: bool = Field(alias="certified")
    control: LightControl


class Light(HueModel):
    """Hue light as reported by ``GET /lights`` or ``GET /lights/<id>``."""

    state: LightState
    capabilities: LightCapabilities
    name: str
    model_id: str = Field(alias="modelid")
    manufacturer_name: str = Field(alias="manufacturername")
    product_name: str = Field(alias="productname")

    def __repr__(self) -> str:
        return f'<{self.__class__.__module__}.{self.__class__.__name__} name="{self.name}" on={self.state.is_on}>'


class ModificationResult(OpenHueModel):
    """One acknowledged change from a PUT to a light or group.

    The bridge answers e.g. ``{"success": {"/lights/1/state/on": true}}``;
    no keys are required, the raw entries stay available as extras.
    """
