import logging
import re
from typing import Any, Optional

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from langcore.domain.interfaces.user_interface import DeliverySink
from langcore.domain.models.common import CacheStatistics, RenderedText
from langcore.infrastructure.localization.color_codes import SECTION_SIGN

logger = logging.getLogger(__name__)

# Legacy color codes and their RGB values
LEGACY_COLORS = {
    '0': "#000000", '1': "#0000AA", '2': "#00AA00", '3': "#00AAAA",
    '4': "#AA0000", '5': "#AA00AA", '6': "#FFAA00", '7': "#AAAAAA",
    '8': "#555555", '9': "#5555FF", 'a': "#55FF55", 'b': "#55FFFF",
    'c': "#FF5555", 'd': "#FF55FF", 'e': "#FFFF55", 'f': "#FFFFFF",
}

FORMAT_STYLES = {
    'k': Style(blink=True),
    'l': Style(bold=True),
    'm': Style(strike=True),
    'n': Style(underline=True),
    'o': Style(italic=True),
}

SECTION_CODE_TOKEN = re.compile(
    re.escape(SECTION_SIGN) + r"x((?:" + re.escape(SECTION_SIGN) + r"[0-9a-fA-F]){6})"
    + r"|" + re.escape(SECTION_SIGN) + r"([0-9a-fk-orA-FK-OR])"
)

# Namespaced keys ('minecraft:entity.player.levelup') or enum names ('ENTITY_PLAYER_LEVELUP')
SOUND_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_.\-/:]+$")


def section_codes_to_text(message: str) -> Text:
    """Converts a §-coded string into a rich Text with equivalent styles.

    A color code resets any active formatting, as in the game client.
    Unrecognized § sequences are kept as plain text.
    """
    text = Text()
    style = Style()
    position = 0
    for match in SECTION_CODE_TOKEN.finditer(message):
        if match.start() > position:
            text.append(message[position:match.start()], style=style)
        position = match.end()

        hex_digits, code = match.group(1), match.group(2)
        if hex_digits:
            style = Style(color="#" + hex_digits.replace(SECTION_SIGN, "").upper())
            continue
        code = code.lower()
        if code in LEGACY_COLORS:
            style = Style(color=LEGACY_COLORS[code])
        elif code == 'r':
            style = Style()
        else:
            style = style + FORMAT_STYLES[code]
    if position < len(message):
        text.append(message[position:], style=style)
    return text


class ConsoleDisplay(DeliverySink):
    """Delivery sink printing rendered text to the terminal with rich."""

    def __init__(self, console: Optional[Console] = None):
        self._console = console or Console()

    @property
    def console(self) -> Console:
        """Get the Rich console instance for direct operations."""
        return self._console

    def send_message(self, text: RenderedText, **kwargs: Any) -> None:
        self.console.print(section_codes_to_text(str(text)))

    def send_title(self, title: Optional[str], subtitle: Optional[str]) -> None:
        """Shows the title in a panel, with the subtitle as its caption."""
        panel = Panel(
            section_codes_to_text(title or ""),
            subtitle=section_codes_to_text(subtitle) if subtitle else None,
            border_style="cyan",
            box=ROUNDED,
            padding=(0, 1),
        )
        self.console.print(panel)

    def send_action_bar(self, text: RenderedText) -> None:
        line = Text("▌ ", style="dim")
        line.append_text(section_codes_to_text(str(text)))
        self.console.print(line)

    def play_sound(self, sound_name: str) -> None:
        if not SOUND_NAME_PATTERN.match(sound_name):
            raise ValueError(f"Invalid sound name: '{sound_name}'")
        self.console.print(Text(f"♪ {sound_name}", style="magenta"))

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_statistics(self, stats: CacheStatistics) -> None:
        """Shows per-category cache sizes and the hit/miss totals as a table."""
        table = Table(title="Language cache", box=ROUNDED, border_style="cyan", padding=(0, 1))
        table.add_column("Category", style="cyan")
        table.add_column("Size", justify="right")
        table.add_column("Capacity", justify="right", style="dim")
        for name, category in stats["categories"].items():
            table.add_row(name, str(category["size"]), str(category["capacity"]))
        table.add_section()
        table.add_row("hits", str(stats["hits"]), "")
        table.add_row("misses", str(stats["misses"]), "")
        table.add_row("hit ratio", f"{stats['hit_ratio']:.2%}", "")
        self.console.print(table)
