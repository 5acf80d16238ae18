"""CLI UI Components."""

from .clipboard import ClipboardWriter
from .renderer import RichRenderer
from .themes import Theme, get_theme, list_themes

__all__ = [
    "ClipboardWriter",
    "RichRenderer",
    "Theme",
    "get_theme",
    "list_themes",
]
