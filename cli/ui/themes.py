"""
Color Themes for Dotty CLI
==========================

Rich-based color themes for terminal output.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class Theme:
    """Color theme for CLI output."""

    # Core colors
    primary: str = "cyan"
    secondary: str = "green"
    warning: str = "yellow"
    error: str = "red"
    success: str = "green"
    info: str = "blue"
    muted: str = "dim"

    # Conversion output
    plain_text: str = "bold white"
    morse: str = "bold yellow"
    boundary: str = "magenta"

    # Table colors
    table_header: str = "bold cyan"
    table_border: str = "dim"


# Built-in themes
THEMES: Dict[str, Theme] = {
    "default": Theme(),

    "dark": Theme(
        primary="bright_cyan",
        secondary="bright_green",
        morse="bold bright_yellow",
        table_header="bold bright_white",
    ),

    "light": Theme(
        primary="blue",
        secondary="green",
        muted="grey50",
        plain_text="bold black",
        morse="bold dark_orange",
        table_border="grey70",
    ),

    "minimal": Theme(
        primary="white",
        secondary="white",
        warning="white",
        error="bold white",
        success="white",
        info="white",
        muted="dim",
        plain_text="bold",
        morse="bold",
        boundary="white",
        table_header="bold",
    ),

    "matrix": Theme(
        primary="green",
        secondary="bright_green",
        warning="yellow",
        error="red",
        success="bright_green",
        info="green",
        plain_text="bold bright_green",
        morse="green",
        boundary="bright_green",
    ),
}


def get_theme(name: str = "default") -> Theme:
    """
    Get theme by name.

    Args:
        name: Theme name (default, dark, light, minimal, matrix)

    Returns:
        Theme instance
    """
    return THEMES.get(name, THEMES["default"])


def list_themes() -> List[str]:
    """List available theme names."""
    return list(THEMES.keys())
