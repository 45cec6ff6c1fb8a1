"""
huelink - An asyncio client for the Philips Hue bridge JSON API

Published under the MIT license

"Hue Personal Wireless Lighting" is a trademark owned by Koninklijke Philips Electronics N.V.
"""

from .exceptions import (
    ErrorKind,
    HueError,
    UnknownError,
    UnsupportedPlatformError,
    UrlParseFailure,
    NetworkError,
    HttpError,
    ParsingFailure,
)
from .endpoint import Endpoint, ResourceKind
from .link import Linked, LinkOutcome, LinkRequired
from .light import Light, LightState, ModificationResult
from .group import Group
from .config import Config, WhitelistEntry
from .schedule import Schedule
from .scene import Scene
from .sensor import Sensor
from .rule import Rule
from .codec import KeyedCollection
from .bridge import Bridge

import logging

logger = logging.getLogger("huelink")


__all__ = [
    "Bridge",
    "ErrorKind",
    "HueError",
    "UnknownError",
    "UnsupportedPlatformError",
    "UrlParseFailure",
    "NetworkError",
    "HttpError",
    "ParsingFailure",
    "Endpoint",
    "ResourceKind",
    "KeyedCollection",
    "Linked",
    "LinkOutcome",
    "LinkRequired",
    "Light",
    "LightState",
    "ModificationResult",
    "Group",
    "Config",
    "WhitelistEntry",
    "Schedule",
    "Scene",
    "Sensor",
    "Rule",
]
