"""Rule records returned by the bridge."""

from typing import Any

from pydantic import Field

from huelink._internal.model import HueModel


class RuleCondition(HueModel):
    address: str
    operator: str
    value: str | None = None


class RuleAction(HueModel):
    address: str
    method: str
    body: dict[str, Any] = Field(default_factory=dict)


class Rule(HueModel):
    """A sensor-driven rule: when all conditions hold, run the actions."""

    name: str
    owner: str
    status: str
    conditions: list[RuleCondition]
    actions: list[RuleAction]
    created: str | None = None
    last_triggered: str | None = Field(default=None, alias="lasttriggered")
    times_triggered: int | None = Field(default=None, alias="timestriggered")
