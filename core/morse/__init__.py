"""
Morse Conversion Engine
=======================

Stateless text <-> Morse conversion over a single immutable symbol table.

Usage:
    from Dotty.core.morse import encode, decode

    encode("Hello World")   # '.... . .-.. .-.. --- / .-- --- .-. .-.. -..'
    decode("... --- ...")   # 'SOS'
"""

from .symbols import (
    DEFAULT_TABLE,
    MORSE_ENTRIES,
    WORD_BOUNDARY,
    WORD_SEPARATOR,
    SymbolTable,
    SymbolTableError,
    get_symbol_table,
)
from .normalizer import collapse_whitespace, normalize_for_decode, normalize_for_encode
from .encoder import encode
from .decoder import PLACEHOLDER, decode, decode_token, tokenize

__all__ = [
    "DEFAULT_TABLE",
    "MORSE_ENTRIES",
    "PLACEHOLDER",
    "WORD_BOUNDARY",
    "WORD_SEPARATOR",
    "SymbolTable",
    "SymbolTableError",
    "collapse_whitespace",
    "decode",
    "decode_token",
    "encode",
    "get_symbol_table",
    "normalize_for_decode",
    "normalize_for_encode",
    "tokenize",
]
