"""Interactive converter REPL."""

from .session import ConversionMode, ConverterSession

__all__ = ["ConversionMode", "ConverterSession"]
