from collections.abc import AsyncIterator
from typing import Any

import pytest

from huelink import Bridge

BRIDGE_URL = "http://192.168.1.100"
USERNAME = "testuser"
API = f"{BRIDGE_URL}/api/{USERNAME}"


def light_json(name: str = "Living Room Bulb", on: bool = True, bri: int = 254) -> dict[str, Any]:
    """A light as the bridge reports it."""
    return {
        "state": {
            "on": on,
            "bri": bri,
            "hue": 10000,
            "sat": 254,
            "reachable": True,
        },
        "capabilities": {
            "certified": True,
            "control": {"mindimlevel": 1000, "maxlumen": 806},
        },
        "type": "Extended color light",
        "name": name,
        "modelid": "LCT007",
        "manufacturername": "Philips",
        "productname": "Hue color lamp",
    }


def group_json(name: str = "Kitchen") -> dict[str, Any]:
    return {
        "name": name,
        "type": "Room",
        "lights": ["1", "2"],
        "sensors": [],
        "state": {"all_on": False, "any_on": True},
        "action": {"on": True, "bri": 200, "hue": 8418},
    }


def scene_json(name: str = "Relax") -> dict[str, Any]:
    return {
        "name": name,
        "type": "GroupScene",
        "group": "1",
        "lights": ["1", "2"],
        "owner": "ffffffffe0341b1b376a2389376a2389",
        "recycle": False,
        "locked": False,
        "appdata": {"version": 1, "data": "myAppData"},
        "lastupdated": "2020-02-02T10:00:00",
        "version": 2,
    }


def schedule_json(name: str = "Wake up") -> dict[str, Any]:
    return {
        "name": name,
        "description": "Morning lights",
        "time": "W124/T06:00:00",
        "localtime": "W124/T07:00:00",
        "created": "2020-02-01T12:00:00",
        "status": "enabled",
        "recycle": False,
        "command": {
            "address": f"/api/{USERNAME}/groups/1/action",
            "method": "PUT",
            "body": {"scene": "Vkj3pJUJwTIWp9T", "transitiontime": 600},
        },
    }


def sensor_json(name: str = "Daylight") -> dict[str, Any]:
    return {
        "name": name,
        "type": "Daylight",
        "modelid": "PHDL00",
        "manufacturername": "Philips",
        "swversion": "1.0",
        "state": {"daylight": True, "lastupdated": "2020-02-02T07:12:00"},
        "config": {"on": True, "configured": True, "sunriseoffset": 30},
    }


def rule_json(name: str = "Dimmer on") -> dict[str, Any]:
    return {
        "name": name,
        "owner": USERNAME,
        "created": "2020-02-01T12:00:00",
        "lasttriggered": "none",
        "timestriggered": 0,
        "status": "enabled",
        "conditions": [
            {"address": "/sensors/2/state/buttonevent", "operator": "eq", "value": "1000"},
            {"address": "/sensors/2/state/lastupdated", "operator": "dx"},
        ],
        "actions": [
            {"address": "/groups/0/action", "method": "PUT", "body": {"on": True}},
        ],
    }


def config_json() -> dict[str, Any]:
    return {
        "name": "Philips hue",
        "zigbeechannel": 15,
        "bridgeid": "001788FFFE100491",
        "mac": "00:17:88:10:04:91",
        "dhcp": True,
        "ipaddress": "192.168.1.100",
        "modelid": "BSB002",
        "apiversion": "1.35.0",
        "whitelist": {
            USERNAME: {
                "last use date": "2020-02-02T10:00:00",
                "create date": "2020-01-01T09:00:00",
                "name": "huelink#tests",
            }
        },
    }


@pytest.fixture
async def bridge() -> AsyncIterator[Bridge]:
    """A paired bridge at BRIDGE_URL."""
    async with Bridge(BRIDGE_URL, username=USERNAME) as bridge:
        yield bridge


@pytest.fixture
async def unpaired_bridge() -> AsyncIterator[Bridge]:
    async with Bridge(BRIDGE_URL) as bridge:
        yield bridge
