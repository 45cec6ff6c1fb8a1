"""Endpoint paths and URL building for the bridge API."""

import enum
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from huelink.exceptions import UrlParseFailure


class ResourceKind(str, enum.Enum):
    """Top-level resource collections exposed by the bridge."""

    LIGHTS = "lights"
    GROUPS = "groups"
    CONFIG = "config"
    SCHEDULES = "schedules"
    SCENES = "scenes"
    SENSORS = "sensors"
    RULES = "rules"


@dataclass(frozen=True)
class Endpoint:
    """A path relative to ``<bridge>/api/[<username>/]``."""

    path: str

    @classmethod
    def collection(cls, kind: ResourceKind) -> "Endpoint":
        return endpoint(kind)

    @classmethod
    def element(cls, kind: ResourceKind, resource_id: str) -> "Endpoint":
        return endpoint(kind, resource_id)

    @classmethod
    def light_state(cls, light_id: str) -> "Endpoint":
        return endpoint(ResourceKind.LIGHTS, light_id, "state")

    @classmethod
    def group_action(cls, group_id: str) -> "Endpoint":
        return endpoint(ResourceKind.GROUPS, group_id, "action")

    @classmethod
    def login(cls) -> "Endpoint":
        """The pairing endpoint, which is the API root itself."""
        return cls("")


def endpoint(
    kind: ResourceKind,
    resource_id: str | None = None,
    subpath: str | None = None,
) -> Endpoint:
    """Build the relative path ``<kind>[/<id>][/<subpath>]``.

    Args:
        kind: The resource collection
        resource_id: Optional ID of a single element
        subpath: Optional sub-resource, e.g. "state" or "action"

    Returns:
        The Endpoint for the request
    """
    segments = [ResourceKind(kind).value]
    if resource_id is not None:
        segments.append(str(resource_id))
    if subpath is not None:
        segments.append(subpath)
    return Endpoint("/".join(segments))


def username_segment(username: str) -> str:
    """The username as it appears in a request path, percent-encoded."""
    return quote(username, safe="")


def build_url(
    bridge_url: str, endpoint: Endpoint, username: str | None = None
) -> httpx.URL:
    """Join bridge address, optional username and endpoint path into a URL.

    Args:
        bridge_url: Scheme and host of the bridge, e.g. "http://192.168.1.2"
        endpoint: The endpoint to address
        username: The authorization token, omitted from the URL when None

    Returns:
        The absolute request URL

    Raises:
        UrlParseFailure: If the result is not a well-formed absolute URL
    """
    if username is None:
        raw = f"{bridge_url}/api/{endpoint.path}"
    else:
        raw = f"{bridge_url}/api/{username_segment(username)}/{endpoint.path}"

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise UrlParseFailure(f"Failed to parse endpoint URL {raw!r}: {e}") from e

    if not url.scheme or not url.host:
        raise UrlParseFailure(f"Failed to parse endpoint URL {raw!r}")
    return url
