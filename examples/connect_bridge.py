#!/usr/bin/env python3
"""
Example showing how to pair with a Philips Hue bridge and list its lights.
This is a good first script to run when setting up huelink.
"""

import asyncio
import logging
import sys

from huelink import Bridge, HueError, Linked, Light

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def light_formatter(light_id: str, light: Light) -> str:
    """Format a light for display."""
    status = "ON" if light.state.is_on else "OFF"
    return f"{light_id:>3}  {light.name:<25} - Status: {status}"


async def pair(bridge: Bridge) -> str:
    """Try to link until the button on the bridge has been pressed."""
    while True:
        input("\nPress the link button on your bridge, then press Enter...")
        outcome = await bridge.link("huelink#example")
        if isinstance(outcome, Linked):
            return outcome.username
        print("Link button was not pressed in time, let's try again.")


async def main() -> int:
    bridge_url = input("Enter your bridge address (e.g. http://192.168.1.100): ")
    if not bridge_url:
        print("No address provided. Exiting.")
        return 1

    try:
        async with Bridge(bridge_url) as bridge:
            username = await pair(bridge)
            print(f"Paired! Keep this username for later: {username}")

            lights = await bridge.lights()
            for light_id, light in sorted(lights.items()):
                print(light_formatter(light_id, light))
    except HueError as e:
        print(f"Connection failed: {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
