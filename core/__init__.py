"""
DOTTY Core Module
=================

- morse: symbol table, normalizer, encoder and decoder
- utils: tool response helpers shared by skills
"""

from .morse import decode, encode, get_symbol_table

__all__ = ["decode", "encode", "get_symbol_table"]
