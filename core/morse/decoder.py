"""
Morse -> text decoder.

Decoding is total: any string decodes to a string. Tokens with no match in
the reverse table show up as PLACEHOLDER so token boundaries stay visible.
"""

import logging
from typing import List

from .normalizer import collapse_whitespace, normalize_for_decode
from .symbols import DEFAULT_TABLE, SymbolTable

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"


def tokenize(code: str) -> List[str]:
    """
    Split Morse input into tokens.

    Returns:
        "/" word boundaries and dot/dash runs in input order ([] for blank input)
    """
    normalized = normalize_for_decode(code)
    if not normalized:
        return []
    return normalized.split(" ")


def decode_token(token: str, table: SymbolTable = DEFAULT_TABLE) -> str:
    """Decode one token to its character, the separator, or PLACEHOLDER."""
    if token == table.boundary:
        return table.separator
    char = table.lookup_char(token)
    return PLACEHOLDER if char is None else char


def decode(code: str, table: SymbolTable = DEFAULT_TABLE) -> str:
    """
    Decode Morse code to plain text.

    Args:
        code: Patterns separated by whitespace, words separated by "/"
        table: Symbol table to decode with

    Returns:
        Uppercase text, e.g. "SOS" for "... --- ..."
    """
    tokens = tokenize(code)
    chars = [decode_token(token, table) for token in tokens]

    unknown = sum(
        1 for token in tokens
        if token != table.boundary and token not in table.reverse
    )
    if unknown:
        logger.debug(f"{unknown} token(s) had no match in the symbol table")

    joined = "".join(chars)
    text = collapse_whitespace(joined)
    # Input made only of word boundaries still yields one separator.
    if not text and joined:
        return table.separator
    return text
