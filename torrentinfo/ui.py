from enum import Enum
from datetime import datetime

from rich.color import ColorSystem
from rich.console import Console
from rich.markup import escape
from rich.style import Style


class Tag(Enum):
    BRIGHT = "bright"
    WHITE = "white"
    GREEN = "green"
    RED = "red"
    CYAN = "cyan"
    YELLOW = "yellow"
    MAGENTA = "magenta"
    DULL = "dull"


# Combined tags render as one merged SGR sequence, e.g. ESC[1;33m
TAG_STYLES = {
    Tag.BRIGHT: Style(bold=True),
    Tag.WHITE: Style(color="white"),
    Tag.GREEN: Style(color="green"),
    Tag.RED: Style(color="red"),
    Tag.CYAN: Style(color="cyan"),
    Tag.YELLOW: Style(color="yellow"),
    Tag.MAGENTA: Style(color="magenta"),
    # rich cannot emit SGR 22 (normal intensity), so DULL renders as faint (SGR 2)
    Tag.DULL: Style(dim=True),
}

LABEL = frozenset({Tag.BRIGHT, Tag.YELLOW})
ALERT = frozenset({Tag.BRIGHT, Tag.RED})


class TextStyler:
    """Wraps text in ANSI SGR sequences for a set of tags."""

    def __init__(self, enabled=True):
        self.enabled = enabled

    def style(self, text: str, tags) -> str:
        if not self.enabled or not tags:
            return text
        # Combine in declaration order so conflicting colours resolve the same way every time
        style = Style.combine(TAG_STYLES[tag] for tag in Tag if tag in tags)
        return style.render(text, color_system=ColorSystem.STANDARD)


class InspectorUI:
    """Status and error messages, kept on stderr away from the rendered output."""

    def __init__(self, colors=True):
        self.console = Console(stderr=True, no_color=not colors, highlight=False)

    def print_log(self, message, level="INFO"):
        """Prints a styled log message."""
        color = "green" if level == "INFO" else "red"
        if level == "WARNING": color = "yellow"

        time_str = f"[{datetime.now().strftime('%H:%M:%S')}]"
        self.console.print(f"{escape(time_str)} [bold {color}]{level}[/]: {escape(str(message))}")
