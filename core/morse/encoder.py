"""
Text -> Morse encoder.
"""

import logging

from .normalizer import collapse_whitespace, normalize_for_encode
from .symbols import DEFAULT_TABLE, SymbolTable

logger = logging.getLogger(__name__)


def encode(text: str, table: SymbolTable = DEFAULT_TABLE) -> str:
    """
    Encode plain text as Morse code.

    Letters are matched case-insensitively. A blank becomes the "/" word
    boundary. Characters with no pattern contribute nothing.

    Args:
        text: Plain text
        table: Symbol table to encode with

    Returns:
        Patterns separated by single spaces, e.g. "... --- ..." for "SOS"
    """
    parts = []
    elided = 0
    for char in normalize_for_encode(text):
        pattern = table.lookup_pattern(char)
        if pattern is None:
            elided += 1
            pattern = ""
        parts.append(pattern)

    if elided:
        logger.debug(f"Elided {elided} unencodable character(s)")

    # Unmapped characters leave empty slots; collapsing removes the doubled spaces.
    return collapse_whitespace(" ".join(parts))
