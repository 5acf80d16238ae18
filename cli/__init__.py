"""
Dotty CLI - Terminal front end for the Morse converter
======================================================

Usage:
    python -m Dotty.cli                     # Interactive REPL
    python -m Dotty.cli encode "SOS"        # One-shot encode
    echo "... --- ..." | dotty decode       # One-shot decode from stdin
    dotty table                             # Show the symbol table

REPL commands:
- /encode, /decode, /mode - choose the conversion direction
- /copy - copy the last result to the clipboard
- /clear, /table, /help, /quit
"""

from .app import DottyCLI

__version__ = "1.0.0"

__all__ = ["DottyCLI", "__version__"]
