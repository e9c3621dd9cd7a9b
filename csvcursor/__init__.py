"""
csvcursor: cursor-driven CSV field tokenizer.

A library and CLI tool for pulling fields out of CSV text one at a time,
with row/column tracking, quoted-field handling and typed accessors.

Usage:
    from csvcursor.core.tokenizer import Tokenizer
    tok = Tokenizer('1,"a,b",true')
    tok.get_int(), tok.get_string(), tok.get_bool()
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
