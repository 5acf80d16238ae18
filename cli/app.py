"""
Dotty CLI Main Application
==========================

Main DottyCLI class that drives one-shot conversions and the interactive REPL.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console

from ..core.morse import get_symbol_table
from .config.defaults import DEFAULT_HISTORY_FILE
from .config.loader import ConfigLoader
from .repl.session import ConversionMode, ConverterSession
from .ui.clipboard import ClipboardWriter
from .ui.renderer import RichRenderer
from .ui.themes import get_theme, list_themes

logger = logging.getLogger(__name__)

COMMAND_HELP: List[Tuple[str, str]] = [
    ("/encode", "Switch to text -> Morse"),
    ("/decode", "Switch to Morse -> text"),
    ("/mode", "Toggle between encode and decode"),
    ("/copy", "Copy the last result to the clipboard"),
    ("/clear", "Clear the current input and output"),
    ("/table", "Show the Morse symbol table"),
    ("/theme NAME", "Switch color theme and save it to the config file"),
    ("/help", "Show this help"),
    ("/quit", "Exit"),
]


class DottyCLI:
    """
    Main Dotty CLI Application.

    Provides:
    - One-shot encode/decode for scripts and pipes
    - An interactive REPL where every line is converted in the active mode
    - Slash commands for switching mode, copying and listing the table
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        no_color: bool = False,
        debug: bool = False,
        console: Optional[Console] = None,
        clipboard: Optional[ClipboardWriter] = None,
    ):
        """
        Initialize DottyCLI.

        Args:
            config_path: Path to config file
            no_color: Disable colored output
            debug: Enable debug mode
            console: Rich console to render to (stdout if omitted)
            clipboard: Clipboard writer used by /copy
        """
        self.config_loader = ConfigLoader(config_path)
        self.config = self.config_loader.load()
        # Command-line flags apply to this run only and are never saved.
        self.no_color = no_color or self.config.no_color
        self.debug = debug or self.config.debug

        self.renderer = RichRenderer(
            theme=self.config.ui.theme,
            no_color=self.no_color,
            max_width=self.config.ui.max_width,
            console=console,
        )
        self.session = ConverterSession(self.config.converter.default_mode)
        self.clipboard = clipboard or ClipboardWriter()
        self.running = False

        # name -> (handler, takes an argument)
        self._commands: Dict[str, Tuple[Callable[..., None], bool]] = {
            "/encode": (lambda: self._switch(ConversionMode.ENCODE), False),
            "/decode": (lambda: self._switch(ConversionMode.DECODE), False),
            "/mode": (self._toggle, False),
            "/copy": (self._copy, False),
            "/clear": (self._clear, False),
            "/table": (self.show_table, False),
            "/theme": (self._theme, True),
            "/help": (lambda: self.renderer.help(COMMAND_HELP), False),
            "/quit": (self._quit, False),
            "/exit": (self._quit, False),
        }

        logger.info("DottyCLI initialized")

    def convert(self, mode: str, text: str) -> str:
        """
        Convert once and print the bare result.

        Args:
            mode: "encode" or "decode"
            text: Input to convert

        Returns:
            The converted string
        """
        self.session.set_mode(mode)
        output = self.session.update(text)
        self.renderer.plain(output)
        return output

    def show_table(self) -> None:
        """Print the symbol table."""
        self.renderer.symbol_table(get_symbol_table().items())

    def configure(
        self,
        action: str,
        key: Optional[str] = None,
        value: Optional[str] = None,
        force: bool = False,
    ) -> int:
        """
        Run a ``dotty config`` action: init, get or set.

        Returns:
            Process exit code
        """
        loader = self.config_loader

        if action == "init":
            if loader.create_default_config(force=force):
                self.renderer.success(f"Wrote {loader.target_file}")
                return 0
            self.renderer.warning(f"{loader.target_file} already exists (use --force to overwrite)")
            return 1

        if action == "get":
            missing = object()
            current = loader.get(key, missing)
            if current is missing:
                self.renderer.error(f"Unknown setting: {key}")
                return 1
            self.renderer.plain(str(current))
            return 0

        if action == "set":
            if not loader.set(key, ConfigLoader.parse_value(value)):
                self.renderer.error(f"Cannot set {key} to {value!r}")
                return 1
            path = loader.save()
            self.config = loader.load()
            self.renderer.success(f"Saved {key} = {value} to {path}")
            return 0

        raise ValueError(f"Unknown config action: {action}")

    def handle_line(self, line: str) -> bool:
        """
        Handle one line of REPL input.

        A line is a command only when it is exactly a command name, or
        ``/theme`` followed by one name. Anything else is converted.

        Args:
            line: Raw input line

        Returns:
            False if the line asked to quit
        """
        stripped = line.strip()
        if not stripped:
            return True

        words = stripped.split()
        name = words[0].lower()
        if name in self._commands:
            handler, takes_arg = self._commands[name]
            if len(words) == (2 if takes_arg else 1):
                handler(*words[1:])
                return name not in ("/quit", "/exit")

        output = self.session.update(line)
        if self.config.ui.show_patterns:
            self.renderer.result(self.session.mode.value, self.session.input_text, output)
        else:
            self.renderer.result(self.session.mode.value, "", output)

        if self.config.session.auto_copy and output:
            self.session.copy_output(self.clipboard)

        return True

    def run_interactive(self) -> int:
        """
        Run the REPL until /quit or end of input.

        Returns:
            Process exit code
        """
        from .. import __version__

        history_path = Path(self.config.session.history_file or DEFAULT_HISTORY_FILE).expanduser()
        history_path.parent.mkdir(parents=True, exist_ok=True)
        prompt_session = PromptSession(history=FileHistory(str(history_path)))

        self.renderer.welcome(__version__, self.session.mode.value)
        self.running = True

        while self.running:
            try:
                line = prompt_session.prompt(
                    self.renderer.prompt(self.session.mode.value),
                    bottom_toolbar=lambda: self.session.copy_status or "",
                )
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if not self.handle_line(line):
                break

        self.running = False
        self.renderer.goodbye()
        return 0

    def _switch(self, mode: ConversionMode) -> None:
        if self.session.set_mode(mode):
            self.renderer.info(f"Switched to {mode.value} mode")
        else:
            self.renderer.info(f"Already in {mode.value} mode")

    def _toggle(self) -> None:
        mode = self.session.toggle_mode()
        self.renderer.info(f"Switched to {mode.value} mode")

    def _copy(self) -> None:
        if self.session.copy_output(self.clipboard) is None:
            self.renderer.warning(self.session.copy_status or "Nothing to copy")
        else:
            self.renderer.info("Copying result to clipboard...")

    def _clear(self) -> None:
        self.session.clear()
        self.renderer.info("Cleared")

    def _theme(self, name: str) -> None:
        name = name.lower()
        if name not in list_themes():
            self.renderer.error(f"Unknown theme {name!r}. Available: {', '.join(list_themes())}")
            return

        self.renderer.theme = get_theme(name)
        self.config_loader.set("ui.theme", name)
        self.config = self.config_loader.load()
        try:
            path = self.config_loader.save()
        except OSError as e:
            logger.error(f"Could not save theme: {e}")
            self.renderer.warning(f"Theme set to {name} for this session (not saved: {e})")
            return
        self.renderer.success(f"Theme set to {name} (saved to {path})")

    def _quit(self) -> None:
        self.running = False
