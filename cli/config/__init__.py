"""CLI configuration."""

from .loader import ConfigLoader
from .schema import CLIConfig, ConverterConfig, SessionConfig, UIConfig

__all__ = [
    "CLIConfig",
    "ConfigLoader",
    "ConverterConfig",
    "SessionConfig",
    "UIConfig",
]
