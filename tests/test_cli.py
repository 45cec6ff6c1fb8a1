"""Test the CLI functionality in the __main__ module."""

from unittest.mock import patch

import httpx
import pytest
import respx

from huelink.__main__ import main

from conftest import API, BRIDGE_URL, USERNAME, config_json, group_json, light_json


@pytest.fixture(autouse=True)
def disable_styling(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("huelink.__main__.DISABLE_STYLING", True)
    monkeypatch.delenv("HUE_BRIDGE_URL", raising=False)
    monkeypatch.delenv("HUE_USERNAME", raising=False)


def test_cli_help() -> None:
    """Test that the CLI can display help."""
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0


def test_cli_no_command() -> None:
    assert main(["--bridge-url", BRIDGE_URL]) == 1


def test_cli_missing_bridge_url() -> None:
    with patch("huelink._internal.console.console.error") as mock_error:
        assert main(["list"]) == 1
        mock_error.assert_called_once_with(
            "No bridge address available. Pass --bridge-url or set HUE_BRIDGE_URL."
        )


def test_cli_requires_username() -> None:
    with patch("huelink._internal.console.console.error") as mock_error:
        assert main(["--bridge-url", BRIDGE_URL, "list"]) == 1
        mock_error.assert_called_once()


@respx.mock
def test_cli_link_success() -> None:
    respx.post(f"{BRIDGE_URL}/api/").mock(
        return_value=httpx.Response(200, json=[{"success": {"username": "abc123"}}])
    )

    with (
        patch("huelink._internal.console.console.success") as mock_success,
        patch("huelink._internal.console.console.info") as mock_info,
    ):
        result = main(["--bridge-url", BRIDGE_URL, "link"])

    assert result == 0
    mock_success.assert_called_with("Successfully linked with the bridge!")
    mock_info.assert_any_call("Username: abc123")


@respx.mock
def test_cli_link_button_not_pressed() -> None:
    route = respx.post(f"{BRIDGE_URL}/api/").mock(
        return_value=httpx.Response(
            200,
            json=[{"error": {"type": 101, "description": "link button not pressed"}}],
        )
    )

    with patch("huelink._internal.console.console.warning") as mock_warning:
        result = main(
            ["--bridge-url", BRIDGE_URL, "link", "--device-type", "tests#cli"]
        )

    assert result == 2
    assert route.calls.last.request.content == b'{"devicetype": "tests#cli"}'
    mock_warning.assert_called_with(
        "Link button not pressed. Press the link button on your bridge."
    )


@respx.mock
def test_cli_list_lights_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HUE_BRIDGE_URL", BRIDGE_URL)
    monkeypatch.setenv("HUE_USERNAME", USERNAME)
    respx.get(f"{API}/lights").mock(
        return_value=httpx.Response(
            200, json={"1": light_json("Hall"), "2": light_json("Porch")}
        )
    )

    with patch("huelink._internal.console.console.info") as mock_info:
        result = main(["list", "lights"])

    assert result == 0
    mock_info.assert_any_call("LIGHTS (2):")


@respx.mock
def test_cli_get_config() -> None:
    respx.get(f"{API}/config").mock(return_value=httpx.Response(200, json=config_json()))

    with patch("huelink._internal.console.console.info") as mock_info:
        result = main(["--bridge-url", BRIDGE_URL, "--username", USERNAME, "get", "config"])

    assert result == 0
    mock_info.assert_any_call("CONFIG: Philips hue")


@respx.mock
def test_cli_get_group() -> None:
    respx.get(f"{API}/groups/1").mock(return_value=httpx.Response(200, json=group_json()))

    with patch("huelink._internal.console.console.info") as mock_info:
        result = main(
            ["--bridge-url", BRIDGE_URL, "--username", USERNAME, "get", "group", "1"]
        )

    assert result == 0
    mock_info.assert_any_call("GROUP 1: Kitchen")


def test_cli_get_requires_id() -> None:
    with patch("huelink._internal.console.console.error") as mock_error:
        result = main(["--bridge-url", BRIDGE_URL, "--username", USERNAME, "get", "light"])

    assert result == 1
    mock_error.assert_called_once_with("An ID is required to get a light")


@respx.mock
def test_cli_set_group_off() -> None:
    route = respx.put(f"{API}/groups/1/action").mock(
        return_value=httpx.Response(200, json=[{"success": {"/groups/1/action/on": False}}])
    )

    with patch("huelink._internal.console.console.success") as mock_success:
        result = main(
            ["--bridge-url", BRIDGE_URL, "--username", USERNAME, "set", "group", "1", "--off"]
        )

    assert result == 0
    assert route.calls.last.request.content == b'{"on": false}'
    mock_success.assert_called_with("Switched group 1 off (1 change(s) acknowledged)")


@respx.mock
def test_cli_reports_http_error() -> None:
    respx.get(f"{API}/lights/9").mock(return_value=httpx.Response(404, json=[]))

    with patch("huelink._internal.console.console.error") as mock_error:
        result = main(
            ["--bridge-url", BRIDGE_URL, "--username", USERNAME, "get", "light", "9"]
        )

    assert result == 1
    mock_error.assert_called_with("Request failed: HTTP Error: 404")
