"""
DOTTY - Text <-> Morse Code Converter
=====================================

    from Dotty import encode, decode

    encode("Hello World")   # '.... . .-.. .-.. --- / .-- --- .-. .-.. -..'
    decode("... --- ...")   # 'SOS'

Both functions are total: unknown characters are dropped when encoding and
unknown patterns decode to '?'. The symbol table is built once, at import.

All imports are lazy — ``import Dotty`` does not load the CLI stack.
"""

import importlib as _importlib

__version__ = "1.0.0"
__author__ = "Dotty"

# =============================================================================
# ALL IMPORTS ARE LAZY — resolved on first attribute access
# =============================================================================

_LAZY_IMPORTS: dict[str, str] = {
    # --- Conversion engine ---
    "encode": ".core.morse",
    "decode": ".core.morse",
    "tokenize": ".core.morse",
    "PLACEHOLDER": ".core.morse",
    "SymbolTable": ".core.morse",
    "SymbolTableError": ".core.morse",
    "get_symbol_table": ".core.morse",

    # --- CLI ---
    "DottyCLI": ".cli.app",
    "ConverterSession": ".cli.repl.session",
    "ConversionMode": ".cli.repl.session",
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module = _importlib.import_module(_LAZY_IMPORTS[name], __name__)
        value = getattr(module, name)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [*_LAZY_IMPORTS.keys()]
