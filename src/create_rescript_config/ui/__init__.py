"""Console output for create-rescript-config."""

from create_rescript_config.ui.theme import THEME, Palette, Symbols
from create_rescript_config.ui.presenter import console

__all__ = [
    "THEME",
    "Palette",
    "Symbols",
    "console",
]
