"""Bridge class for talking to a Philips Hue bridge."""

import asyncio
import logging
from typing import Any, TypeVar

import httpx

from huelink import codec
from huelink.codec import KeyedCollection
from huelink.config import Config
from huelink.endpoint import Endpoint, ResourceKind, build_url
from huelink.exceptions import HttpError, classified
from huelink.group import Group
from huelink.light import Light, ModificationResult
from huelink.link import LinkOutcome, LinkRequired
from huelink.rule import Rule
from huelink.scene import Scene
from huelink.schedule import Schedule
from huelink.sensor import Sensor
from huelink.transport import Transport

logger = logging.getLogger("huelink")

T = TypeVar("T")


class Bridge:
    """Asynchronous interface to the Hue bridge JSON API

    Pair once to obtain a username, then read and change resources:

        >>> async with Bridge("http://192.168.1.100") as bridge:
        ...     outcome = await bridge.link("my_app#laptop")
        ...     lights = await bridge.lights()
        >>> lights
        {'1': <huelink.light.Light name="Kitchen" on=True>}

    Every coroutine raises a :class:`huelink.HueError` subclass on failure.
    Concurrent calls on one instance are safe; requests made while a pairing
    is in flight wait for it and use its username.
    """

    def __init__(
        self,
        bridge_url: str,
        username: str | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialization function.

        Args:
            bridge_url: Scheme and host of the bridge, e.g. "http://192.168.1.100"
            username: Optional username from an earlier pairing
            client: Optional httpx client to send requests with; use it to
                set timeouts or TLS options. It is not closed by the bridge.
        """
        self._bridge_url = bridge_url.rstrip("/")
        self._username = username
        self._username_lock = asyncio.Lock()
        self._transport = Transport(client)

    def __repr__(self) -> str:
        paired = "paired" if self._username else "unpaired"
        return f"<{self.__class__.__module__}.{self.__class__.__name__} {self._bridge_url} {paired}>"

    async def __aenter__(self) -> "Bridge":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the bridge created it."""
        await self._transport.aclose()

    @property
    def bridge_url(self) -> str:
        return self._bridge_url

    @property
    def username(self) -> str | None:
        """The whitelisted username, or None before pairing."""
        return self._username

    @property
    def is_paired(self) -> bool:
        return self._username is not None

    def url(self, endpoint: Endpoint) -> httpx.URL:
        """Absolute URL for ``endpoint``, including the username if paired."""
        return build_url(self._bridge_url, endpoint, self._username)

    async def _current_username(self) -> str | None:
        # Waits for a pairing in flight; the lock is released before the request.
        async with self._username_lock:
            return self._username

    async def _request(
        self,
        method: str,
        endpoint: Endpoint,
        body: bytes | None,
        username: str | None,
    ) -> bytes:
        url = build_url(self._bridge_url, endpoint, username)
        return await self._transport.send(method, url, body, secret=username)

    async def _send(
        self, method: str, endpoint: Endpoint, body: bytes | None = None
    ) -> bytes:
        username = await self._current_username()
        return await self._request(method, endpoint, body, username)

    async def _get(self, endpoint: Endpoint, target: type[T] | Any) -> T:
        async with classified():
            data = await self._send("GET", endpoint)
            return codec.decode(data, target)

    async def _get_collection(
        self, kind: ResourceKind, element: type[T]
    ) -> KeyedCollection[T]:
        async with classified():
            data = await self._send("GET", Endpoint.collection(kind))
            return codec.decode_collection(data, element)

    async def _set_on(
        self, endpoint: Endpoint, state: bool
    ) -> list[ModificationResult]:
        async with classified():
            data = await self._send("PUT", endpoint, codec.encode_on(state))
            return codec.decode(data, list[ModificationResult])

    # Pairing #####
    async def link(self, device_type: str) -> LinkOutcome:
        """Ask the bridge to whitelist a new username.

        Args:
            device_type: A name for the paired application, e.g. "my_app#laptop"

        Returns:
            LinkRequired if the link button has not been pressed yet, otherwise
            Linked with the new username, which is stored on this bridge

        Raises:
            ParsingFailure: If the response is neither of those answers
        """
        async with classified(), self._username_lock:
            body = codec.encode_link(device_type)
            try:
                data = await self._request("POST", Endpoint.login(), body, None)
            except HttpError as e:
                if codec.is_link_required(e.body):
                    logger.info("Link button not pressed")
                    return LinkRequired()
                raise

            outcome = codec.decode_link_response(data)
            if isinstance(outcome, LinkRequired):
                logger.info("Link button not pressed")
                return outcome

            self._username = outcome.username
            logger.info(f"Linked with bridge at {self._bridge_url}")
            return outcome

    async def clear_username(self) -> None:
        """Forget the username; the next requests are unauthenticated."""
        async with self._username_lock:
            self._username = None

    # Lights #####
    async def lights(self) -> KeyedCollection[Light]:
        """All lights known to the bridge, keyed by light ID."""
        return await self._get_collection(ResourceKind.LIGHTS, Light)

    async def light(self, light_id: str) -> Light:
        return await self._get(Endpoint.element(ResourceKind.LIGHTS, light_id), Light)

    async def set_light(self, light_id: str, on: bool) -> list[ModificationResult]:
        """Switch a light on or off.

        Args:
            light_id: The ID of the light
            on: True to switch on, False to switch off

        Returns:
            One entry per change the bridge acknowledged
        """
        return await self._set_on(Endpoint.light_state(light_id), on)

    # Groups of lights #####
    async def groups(self) -> KeyedCollection[Group]:
        """All groups known to the bridge, keyed by group ID."""
        return await self._get_collection(ResourceKind.GROUPS, Group)

    async def group(self, group_id: str) -> Group:
        return await self._get(Endpoint.element(ResourceKind.GROUPS, group_id), Group)

    async def set_group(self, group_id: str, on: bool) -> list[ModificationResult]:
        """Switch every light of a group on or off.

        Args:
            group_id: The ID of the group; "0" addresses all lights
            on: True to switch on, False to switch off

        Returns:
            One entry per change the bridge acknowledged
        """
        return await self._set_on(Endpoint.group_action(group_id), on)

    # Config #####
    async def config(self) -> Config:
        return await self._get(Endpoint.collection(ResourceKind.CONFIG), Config)

    # Schedules #####
    async def schedules(self) -> KeyedCollection[Schedule]:
        return await self._get_collection(ResourceKind.SCHEDULES, Schedule)

    async def schedule(self, schedule_id: str) -> Schedule:
        return await self._get(
            Endpoint.element(ResourceKind.SCHEDULES, schedule_id), Schedule
        )

    # Scenes #####
    async def scenes(self) -> KeyedCollection[Scene]:
        return await self._get_collection(ResourceKind.SCENES, Scene)

    async def scene(self, scene_id: str) -> Scene:
        return await self._get(Endpoint.element(ResourceKind.SCENES, scene_id), Scene)

    # Sensors #####
    async def sensors(self) -> KeyedCollection[Sensor]:
        return await self._get_collection(ResourceKind.SENSORS, Sensor)

    async def sensor(self, sensor_id: str) -> Sensor:
        return await self._get(
            Endpoint.element(ResourceKind.SENSORS, sensor_id), Sensor
        )

    # Rules #####
    async def rules(self) -> KeyedCollection[Rule]:
        return await self._get_collection(ResourceKind.RULES, Rule)

    async def rule(self, rule_id: str) -> Rule:
        return await self._get(Endpoint.element(ResourceKind.RULES, rule_id), Rule)
