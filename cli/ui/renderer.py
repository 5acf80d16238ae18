"""
Rich Renderer for Dotty CLI
===========================

Main rendering class using Rich library.
"""

from typing import Any, Iterable, Optional, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .themes import Theme, get_theme


class RichRenderer:
    """
    Rich-based renderer for CLI output.

    Handles:
    - Conversion results
    - Status messages
    - Symbol table listing
    - Color theming
    """

    def __init__(
        self,
        theme: Optional[str] = None,
        no_color: bool = False,
        max_width: int = 100,
        console: Optional[Console] = None,
    ) -> None:
        """
        Initialize renderer.

        Args:
            theme: Theme name (default, dark, light, minimal, matrix)
            no_color: Disable colored output
            max_width: Maximum output width
            console: Console to write to (a new stdout console if omitted)
        """
        self.theme: Theme = get_theme(theme or "default")
        self.no_color = no_color
        self.max_width = max_width
        self._console = console or Console(no_color=no_color, width=max_width)

    @property
    def console(self) -> Console:
        """Get Rich console."""
        return self._console

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def plain(self, text: str) -> None:
        """Print text with no markup or highlighting (for piping)."""
        self._console.print(text, markup=False, highlight=False, soft_wrap=True)

    def _status_line(self, symbol: str, style: str, message: str) -> None:
        if self.no_color:
            self._console.print(f"{symbol} {escape(message)}", highlight=False)
        else:
            self._console.print(f"[{style}]{symbol}[/{style}] {escape(message)}", highlight=False)

    def info(self, message: str) -> None:
        """Print info message."""
        self._status_line("i", self.theme.info, message)

    def success(self, message: str) -> None:
        """Print success message."""
        self._status_line("✓", self.theme.success, message)

    def warning(self, message: str) -> None:
        """Print warning message."""
        self._status_line("!", self.theme.warning, message)

    def error(self, message: str) -> None:
        """Print error message."""
        self._status_line("✗", self.theme.error, message)

    def morse_text(self, morse: str) -> Text:
        """Style Morse output, highlighting word boundaries."""
        text = Text()
        for index, token in enumerate(morse.split(" ")):
            if index:
                text.append(" ")
            style = self.theme.boundary if token == "/" else self.theme.morse
            text.append(token, style=style)
        return text

    def result(self, mode: str, source: str, output: str) -> None:
        """
        Print a conversion result in a panel.

        Args:
            mode: "encode" or "decode"
            source: The converted input
            output: The conversion output
        """
        if mode == "encode":
            body = self.morse_text(output)
            title = "Morse"
        else:
            body = Text(output, style=self.theme.plain_text)
            title = "Text"

        if not output:
            body = Text("(nothing to convert)", style=self.theme.muted)

        panel = Panel(
            body,
            title=title,
            subtitle=Text(source, style=self.theme.muted) if source else None,
            border_style=self.theme.primary,
            box=box.ROUNDED,
            expand=False,
        )
        self._console.print(panel)

    def symbol_table(self, items: Iterable[Tuple[str, str]], columns: int = 3) -> None:
        """
        Print character/pattern pairs as a table.

        Args:
            items: (character, pattern) pairs
            columns: Number of pair columns per row
        """
        table = Table(
            title="Morse Symbol Table",
            box=box.ROUNDED,
            header_style=self.theme.table_header,
            border_style=self.theme.table_border,
        )
        for _ in range(columns):
            table.add_column("Char", justify="center")
            table.add_column("Pattern", style=self.theme.morse)

        pairs = [("␣" if char == " " else char, pattern) for char, pattern in items]
        for start in range(0, len(pairs), columns):
            row = []
            for char, pattern in pairs[start:start + columns]:
                row.extend([char, pattern])
            row.extend([""] * (2 * columns - len(row)))
            table.add_row(*row)

        self._console.print(table)

    def help(self, commands: Iterable[Tuple[str, str]]) -> None:
        """Print slash command help."""
        table = Table(box=box.SIMPLE, show_header=False)
        table.add_column("Command", style=self.theme.secondary)
        table.add_column("Description")
        for name, description in commands:
            table.add_row(name, description)
        self._console.print(table)

    def welcome(self, version: str, mode: str) -> None:
        """Print welcome banner."""
        self._console.print(
            f"[bold {self.theme.primary}]-.. --- - - -.--[/bold {self.theme.primary}]  "
            f"Dotty Morse converter v{escape(version)}"
        )
        self._console.print(
            f"Mode: [bold]{mode}[/bold]. Type [bold]/help[/bold] for commands, "
            f"or just start typing!"
        )

    def prompt(self, mode: str) -> str:
        """Get prompt string (plain text for prompt_toolkit compatibility)."""
        return f"{mode}> "

    def goodbye(self) -> None:
        """Print goodbye message."""
        self._console.print(f"\n[{self.theme.muted}]Goodbye![/{self.theme.muted}]")
