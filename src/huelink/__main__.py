"""Command-line interface for the huelink library."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any

from huelink import Bridge, HueError, Linked
from huelink._internal.console import console

DISABLE_STYLING = False

DEFAULT_DEVICE_TYPE = "huelink#cli"

LIST_RESOURCES = ["lights", "groups", "schedules", "scenes", "sensors", "rules"]
GET_RESOURCES = ["light", "group", "schedule", "scene", "sensor", "rule", "config"]


def parse_args(
    argv: list[str] | None = None,
) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    """Parse command line arguments.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Tuple of (parser, parsed_args)
    """
    parser = argparse.ArgumentParser(
        prog="huelink", description="Talk to a Philips Hue bridge"
    )
    parser.add_argument(
        "--bridge-url",
        default=os.environ.get("HUE_BRIDGE_URL"),
        help="Bridge address including scheme, e.g. http://192.168.1.100 "
        "(default: $HUE_BRIDGE_URL)",
    )
    parser.add_argument(
        "--username",
        default=os.environ.get("HUE_USERNAME"),
        help="Username from an earlier pairing (default: $HUE_USERNAME)",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    link_parser = subparsers.add_parser("link", help="Pair with the bridge")
    link_parser.add_argument(
        "--device-type",
        default=DEFAULT_DEVICE_TYPE,
        help=f"Name to register with the bridge (default: {DEFAULT_DEVICE_TYPE})",
    )

    list_parser = subparsers.add_parser(
        "list", aliases=["ls"], help="List available resources"
    )
    list_parser.add_argument(
        "resource",
        nargs="?",
        choices=LIST_RESOURCES,
        default="lights",
        help="Resource type to list",
    )

    get_parser = subparsers.add_parser("get", help="Get resource details")
    get_parser.add_argument("resource", choices=GET_RESOURCES, help="Resource type")
    get_parser.add_argument("id", nargs="?", help="Resource ID (not used for config)")

    set_parser = subparsers.add_parser("set", help="Switch a light or group")
    set_parser.add_argument(
        "resource", choices=["light", "group"], help="Resource type"
    )
    set_parser.add_argument("id", help="Resource ID")
    state = set_parser.add_mutually_exclusive_group(required=True)
    state.add_argument("--on", dest="on", action="store_true", help="Turn on")
    state.add_argument("--off", dest="on", action="store_false", help="Turn off")

    return parser, parser.parse_args(argv)


def _name_and_state(item: Any) -> str:
    """One table line for any record with a name."""
    state = getattr(item, "state", None)
    is_on = getattr(state, "is_on", getattr(state, "is_any_on", None))
    return f"{item.name:<30} {console.on_off(is_on)}"


def _fields(item: Any) -> dict[str, object]:
    fields: dict[str, object] = {}
    for name, value in item:
        if hasattr(value, "model_dump"):
            value = value.model_dump(exclude_none=True)
        fields[name] = value
    return fields


async def link(bridge: Bridge, device_type: str) -> int:
    outcome = await bridge.link(device_type)
    if isinstance(outcome, Linked):
        console.success("Successfully linked with the bridge!")
        console.info(f"Username: {outcome.username}")
        console.info("Export it as HUE_USERNAME to use it with other commands.")
        return 0
    console.warning("Link button not pressed. Press the link button on your bridge.")
    return 2


async def list_resources(bridge: Bridge, resource: str) -> int:
    items = await getattr(bridge, resource)()
    console.table(resource, items, _name_and_state)
    return 0


async def get_resource(bridge: Bridge, resource: str, resource_id: str | None) -> int:
    if resource == "config":
        item = await bridge.config()
        console.details(f"CONFIG: {item.name}", _fields(item))
        return 0

    if resource_id is None:
        console.error(f"An ID is required to get a {resource}")
        return 1

    item = await getattr(bridge, resource)(resource_id)
    console.details(f"{resource.upper()} {resource_id}: {item.name}", _fields(item))
    return 0


async def set_resource(bridge: Bridge, resource: str, resource_id: str, on: bool) -> int:
    if resource == "light":
        results = await bridge.set_light(resource_id, on)
    else:
        results = await bridge.set_group(resource_id, on)
    console.success(
        f"Switched {resource} {resource_id} {'on' if on else 'off'} "
        f"({len(results)} change(s) acknowledged)"
    )
    return 0


async def run(args: argparse.Namespace) -> int:
    """Execute the parsed command against the bridge."""
    async with Bridge(args.bridge_url, username=args.username) as bridge:
        if args.command == "link":
            return await link(bridge, args.device_type)

        if not bridge.is_paired:
            console.error(
                "No username available. Run 'huelink link' first, then pass "
                "--username or set HUE_USERNAME."
            )
            return 1

        if args.command in ["list", "ls"]:
            return await list_resources(bridge, args.resource)
        if args.command == "get":
            return await get_resource(bridge, args.resource, args.id)
        return await set_resource(bridge, args.resource, args.id, args.on)


def main(argv: list[str] | None = None) -> int:
    """Run the huelink command-line interface.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser, args = parse_args(argv)

    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(level=log_level)
    console.plain = DISABLE_STYLING

    if not args.command:
        parser.print_help()
        return 1

    if not args.bridge_url:
        console.error(
            "No bridge address available. Pass --bridge-url or set HUE_BRIDGE_URL."
        )
        return 1

    try:
        return asyncio.run(run(args))
    except HueError as e:
        console.error(f"Request failed: {e.message}")
        return 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
