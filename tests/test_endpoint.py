"""Test endpoint paths and URL building."""

import pytest

from huelink import Endpoint, ResourceKind, UrlParseFailure
from huelink.endpoint import build_url, endpoint


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_collection_path_is_kind(kind: ResourceKind) -> None:
    assert Endpoint.collection(kind).path == kind.value


@pytest.mark.parametrize("kind", list(ResourceKind))
def test_element_path(kind: ResourceKind) -> None:
    assert Endpoint.element(kind, "7").path == f"{kind.value}/7"


def test_sub_paths() -> None:
    assert Endpoint.light_state("3").path == "lights/3/state"
    assert Endpoint.group_action("0").path == "groups/0/action"
    assert endpoint(ResourceKind.SENSORS, "12", "config").path == "sensors/12/config"


def test_login_path_is_empty() -> None:
    assert Endpoint.login().path == ""


def test_endpoint_accepts_kind_name() -> None:
    assert endpoint("scenes", "Vkj3pJUJwTIWp9T").path == "scenes/Vkj3pJUJwTIWp9T"


def test_token_only_changes_url() -> None:
    light = Endpoint.element(ResourceKind.LIGHTS, "1")

    without = build_url("http://10.0.0.2", light)
    with_token = build_url("http://10.0.0.2", light, "abc123")

    assert light.path == "lights/1"
    assert str(without) == "http://10.0.0.2/api/lights/1"
    assert str(with_token) == "http://10.0.0.2/api/abc123/lights/1"


def test_username_is_percent_encoded() -> None:
    url = build_url("http://10.0.0.2", Endpoint.collection(ResourceKind.LIGHTS), "a b#c")

    assert str(url) == "http://10.0.0.2/api/a%20b%23c/lights"
    assert url.path == "/api/a b#c/lights"


def test_login_url() -> None:
    assert str(build_url("https://10.0.0.2", Endpoint.login())) == "https://10.0.0.2/api/"


@pytest.mark.parametrize(
    "bridge_url",
    [
        "",
        "10.0.0.2",
        "http://",
        "http://10.0.0.2:notaport",
    ],
)
def test_malformed_bridge_address(bridge_url: str) -> None:
    with pytest.raises(UrlParseFailure):
        build_url(bridge_url, Endpoint.collection(ResourceKind.LIGHTS))
