"""Console theme for create-rescript-config."""

from rich.style import Style
from rich.theme import Theme


class Palette:
    """Colors used across the console output."""

    PRIMARY = "blue"
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "red"
    TEXT_DIM = "bright_black"


THEME = Theme({
    "title": Style(color=Palette.PRIMARY, bold=True),
    "version": Style(color=Palette.SUCCESS, bold=True),
    "success": Style(color=Palette.SUCCESS, bold=True),
    "error": Style(color=Palette.ERROR, bold=True),
    "warning": Style(color=Palette.WARNING),
    "file": Style(bold=True),
    "command": Style(bold=True),
    "text.dim": Style(color=Palette.TEXT_DIM),
})


class Symbols:
    """Terminal symbols for status display."""

    COMPLETE = "✓"
    FAILED = "✗"
