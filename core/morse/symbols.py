"""
Symbol Table
============

The authoritative character <-> Morse pattern mapping.

The forward table is an exhaustively enumerated tuple of pairs. The reverse
table is derived from it once, at construction time, and every pattern must
be unique: a collision is a configuration error, never an overwrite.

Usage:
    from Dotty.core.morse.symbols import get_symbol_table

    table = get_symbol_table()
    table.lookup_pattern("S")    # '...'
    table.lookup_char("---")     # 'O'
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

DOT = "."
DASH = "-"
WORD_SEPARATOR = " "
WORD_BOUNDARY = "/"

MORSE_ENTRIES: Tuple[Tuple[str, str], ...] = (
    # Letters
    ("A", ".-"),
    ("B", "-..."),
    ("C", "-.-."),
    ("D", "-.."),
    ("E", "."),
    ("F", "..-."),
    ("G", "--."),
    ("H", "...."),
    ("I", ".."),
    ("J", ".---"),
    ("K", "-.-"),
    ("L", ".-.."),
    ("M", "--"),
    ("N", "-."),
    ("O", "---"),
    ("P", ".--."),
    ("Q", "--.-"),
    ("R", ".-."),
    ("S", "..."),
    ("T", "-"),
    ("U", "..-"),
    ("V", "...-"),
    ("W", ".--"),
    ("X", "-..-"),
    ("Y", "-.--"),
    ("Z", "--.."),
    # Digits
    ("0", "-----"),
    ("1", ".----"),
    ("2", "..---"),
    ("3", "...--"),
    ("4", "....-"),
    ("5", "....."),
    ("6", "-...."),
    ("7", "--..."),
    ("8", "---.."),
    ("9", "----."),
    # Punctuation
    (".", ".-.-.-"),
    (",", "--..--"),
    ("?", "..--.."),
    ("'", ".----."),
    ("!", "-.-.--"),
    ("/", "-..-."),
    ("(", "-.--."),
    (")", "-.--.-"),
    ("&", ".-..."),
    (":", "---..."),
    (";", "-.-.-."),
    ("=", "-...-"),
    ("+", ".-.-."),
    ("-", "-....-"),
    ("_", "..--.-"),
    ('"', ".-..-."),
    ("$", "...-..-"),
    ("@", ".--.-."),
    # Word separator
    (WORD_SEPARATOR, WORD_BOUNDARY),
)


class SymbolTableError(ValueError):
    """Raised when a symbol table definition is not a valid, injective mapping."""

    def __init__(
        self,
        message: str,
        pattern: Optional[str] = None,
        keys: Tuple[str, ...] = ()
    ):
        super().__init__(message)
        self.pattern = pattern
        self.keys = keys


class SymbolTable:
    """
    Immutable bidirectional character <-> pattern table.

    Construction validates every entry and builds the reverse table by
    inverting the forward one. Both views are read-only.

    Args:
        entries: Ordered (character, pattern) pairs
        separator: Character that marks a word boundary in plain text
        boundary: Token the separator encodes to
    """

    def __init__(
        self,
        entries: Iterable[Tuple[str, str]],
        separator: str = WORD_SEPARATOR,
        boundary: str = WORD_BOUNDARY
    ) -> None:
        self.separator = separator
        self.boundary = boundary

        forward: Dict[str, str] = {}
        for char, pattern in entries:
            self._validate_entry(char, pattern)
            if char in forward:
                raise SymbolTableError(
                    f"Duplicate symbol table key {char!r}",
                    pattern=pattern,
                    keys=(char,)
                )
            forward[char] = pattern

        self._forward: Mapping[str, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, str] = MappingProxyType(self._invert(forward))

        logger.debug(f"Built symbol table with {len(forward)} entries")

    def _validate_entry(self, char: str, pattern: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise SymbolTableError(
                f"Symbol table keys must be single characters, got {char!r}",
                pattern=pattern
            )
        if not isinstance(pattern, str) or not pattern:
            raise SymbolTableError(
                f"Empty pattern for {char!r}",
                pattern=pattern,
                keys=(char,)
            )

        if char == self.separator:
            if pattern != self.boundary:
                raise SymbolTableError(
                    f"Separator {char!r} must map to {self.boundary!r}, got {pattern!r}",
                    pattern=pattern,
                    keys=(char,)
                )
            return

        if pattern.strip(DOT + DASH):
            raise SymbolTableError(
                f"Pattern {pattern!r} for {char!r} may only contain '{DOT}' and '{DASH}'",
                pattern=pattern,
                keys=(char,)
            )

    @staticmethod
    def _invert(forward: Mapping[str, str]) -> Dict[str, str]:
        """Build pattern -> character, refusing to overwrite on a collision."""
        reverse: Dict[str, str] = {}
        for char, pattern in forward.items():
            existing = reverse.get(pattern)
            if existing is not None:
                raise SymbolTableError(
                    f"Pattern {pattern!r} is shared by {existing!r} and {char!r}",
                    pattern=pattern,
                    keys=(existing, char)
                )
            reverse[pattern] = char
        return reverse

    def lookup_pattern(self, char: str) -> Optional[str]:
        """Pattern for a canonical character, or None if it has none."""
        return self._forward.get(char)

    def lookup_char(self, pattern: str) -> Optional[str]:
        """Character for a pattern, or None if no character uses it."""
        return self._reverse.get(pattern)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    @property
    def characters(self) -> List[str]:
        return list(self._forward)

    @property
    def patterns(self) -> List[str]:
        return list(self._reverse)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._forward.items())

    def __contains__(self, char: object) -> bool:
        return char in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"SymbolTable(entries={len(self)})"


# Built once at import; every conversion reads this instance.
DEFAULT_TABLE = SymbolTable(MORSE_ENTRIES)


def get_symbol_table() -> SymbolTable:
    """Get the process-wide symbol table."""
    return DEFAULT_TABLE
