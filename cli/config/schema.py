"""
CLI Configuration Schema
========================

Dataclass-based configuration for the Dotty CLI.
"""

import logging
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

from ..ui.themes import list_themes

logger = logging.getLogger(__name__)

VALID_MODES = ("encode", "decode")


@dataclass
class ConverterConfig:
    """Conversion configuration."""
    default_mode: str = "encode"


@dataclass
class UIConfig:
    """UI configuration."""
    theme: str = "default"
    show_patterns: bool = True  # echo the input above each result
    max_width: int = 100


@dataclass
class SessionConfig:
    """Session configuration."""
    history_file: Optional[str] = None
    auto_copy: bool = False


@dataclass
class CLIConfig:
    """
    Main CLI Configuration.

    Loaded from ~/.dotty/config.yaml or custom path.
    """
    converter: ConverterConfig = field(default_factory=ConverterConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    session: SessionConfig = field(default_factory=SessionConfig)

    # Runtime settings
    debug: bool = False
    no_color: bool = False

    @classmethod
    def default(cls) -> "CLIConfig":
        """Create default configuration."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "converter": {
                "default_mode": self.converter.default_mode,
            },
            "ui": {
                "theme": self.ui.theme,
                "show_patterns": self.ui.show_patterns,
                "max_width": self.ui.max_width,
            },
            "session": {
                "history_file": self.session.history_file,
                "auto_copy": self.session.auto_copy,
            },
            "debug": self.debug,
            "no_color": self.no_color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CLIConfig":
        """Create from dictionary. Invalid values keep their defaults."""
        config = cls()

        if isinstance(data.get("converter"), dict):
            c = data["converter"]
            mode = str(c.get("default_mode", "encode")).lower()
            if mode not in VALID_MODES:
                logger.warning(f"Invalid converter.default_mode {mode!r}, using 'encode'")
                mode = "encode"
            config.converter = ConverterConfig(default_mode=mode)

        if isinstance(data.get("ui"), dict):
            u = data["ui"]
            max_width = u.get("max_width", 100)
            if not isinstance(max_width, int) or max_width <= 0:
                logger.warning(f"Invalid ui.max_width {max_width!r}, using 100")
                max_width = 100
            theme = u.get("theme", "default")
            if theme not in list_themes():
                logger.warning(f"Unknown ui.theme {theme!r}, using 'default'")
                theme = "default"
            config.ui = UIConfig(
                theme=theme,
                show_patterns=bool(u.get("show_patterns", True)),
                max_width=max_width,
            )

        if isinstance(data.get("session"), dict):
            s = data["session"]
            config.session = SessionConfig(
                history_file=s.get("history_file"),
                auto_copy=bool(s.get("auto_copy", False)),
            )

        config.debug = bool(data.get("debug", False))
        config.no_color = bool(data.get("no_color", False))

        return config
