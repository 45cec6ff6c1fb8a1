"""Coloured terminal output for the huelink command line."""

from __future__ import annotations

import platform
import sys
from collections.abc import Callable, Mapping
from typing import TypeVar

# Windows consoles may not understand ANSI codes
COLORS_ENABLED = platform.system() != "Windows"

RESET = "\033[0m"
BOLD = "\033[1m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
BLUE = "\033[34m"
CYAN = "\033[36m"


def styled_text(text: str, *styles: str) -> str:
    """Wrap text in ANSI styles, or return it unchanged if colors are off."""
    if not COLORS_ENABLED or not styles:
        return text
    return f"{''.join(styles)}{text}{RESET}"


T = TypeVar("T")


class TerminalUI:
    """Prints status lines and resource tables."""

    plain = False

    def _style(self, text: str, *styles: str) -> str:
        if self.plain:
            return text
        return styled_text(text, *styles)

    def success(self, message: str) -> None:
        print(self._style(f"✓ {message}", GREEN, BOLD))

    def info(self, message: str) -> None:
        print(self._style(message, CYAN))

    def warning(self, message: str) -> None:
        print(self._style(f"⚠ {message}", YELLOW, BOLD), file=sys.stderr)

    def error(self, message: str) -> None:
        print(self._style(f"✗ {message}", RED, BOLD), file=sys.stderr)

    def on_off(self, value: bool | None) -> str:
        if value is None:
            return "-"
        return self._style("ON", GREEN) if value else self._style("OFF", RED)

    def table(
        self, title: str, items: Mapping[str, T], formatter: Callable[[T], str]
    ) -> None:
        """Print a header and one line per ``id: item``, sorted by ID.

        Args:
            title: Resource name shown in the header, e.g. "lights"
            items: Resources keyed by ID
            formatter: Renders one resource after its ID
        """
        self.info(self._style(f"{title.upper()} ({len(items)}):", YELLOW, BOLD))
        # numeric IDs first, in numeric order; scene IDs are not numeric
        for key in sorted(items, key=lambda k: (not k.isdigit(), k.zfill(8))):
            print(f"  {self._style(key.rjust(4), BLUE)}  {formatter(items[key])}")

    def details(self, title: str, fields: Mapping[str, object]) -> None:
        """Print a header and aligned ``label: value`` lines."""
        self.info(self._style(title, YELLOW, BOLD))
        width = max((len(label) for label in fields), default=0) + 1
        for label, value in fields.items():
            print(f"  {self._style((label + ':').ljust(width), BLUE)} {value}")


console = TerminalUI()
