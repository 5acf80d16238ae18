"""
Input normalization applied before symbol table lookups.
"""

import re

from .symbols import WORD_BOUNDARY

_WHITESPACE_RUN = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim both ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def normalize_for_encode(text: str) -> str:
    """
    Canonicalize plain text for encoding.

    Only the case changes. Characters without a pattern are left in place
    so the encoder sees them as absent lookups.
    """
    return text.upper()


def normalize_for_decode(code: str) -> str:
    """
    Canonicalize Morse input for tokenizing.

    Word boundaries are padded with spaces so "...//---" splits into
    separate tokens, then whitespace is collapsed and trimmed.
    """
    padded = code.replace(WORD_BOUNDARY, f" {WORD_BOUNDARY} ")
    return collapse_whitespace(padded)
