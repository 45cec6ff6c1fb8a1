"""Pairing ("link") responses and outcomes."""

from dataclasses import dataclass

from huelink._internal.model import HueModel

# Error type the bridge reports until its link button has been pressed
LINK_BUTTON_NOT_PRESSED = 101


class LinkErrorContent(HueModel):
    type: int
    description: str


class LinkErrorResponse(HueModel):
    """``{"error": {"type": 101, "description": "link button not pressed"}}``"""

    error: LinkErrorContent

    @property
    def is_link_request(self) -> bool:
        return self.error.type == LINK_BUTTON_NOT_PRESSED


class LinkSuccessContent(HueModel):
    username: str


class LinkSuccessResponse(HueModel):
    """``{"success": {"username": "..."}}``"""

    success: LinkSuccessContent


@dataclass(frozen=True)
class LinkRequired:
    """The link button must be pressed before pairing can succeed."""


@dataclass(frozen=True)
class Linked:
    """Pairing succeeded and the bridge whitelisted ``username``."""

    username: str


LinkOutcome = LinkRequired | Linked
