"""
CSV Tokenizer Core.

Public API for pulling fields out of CSV text.

Usage:
    from csvcursor.core.tokenizer import Tokenizer

    tok = Tokenizer.from_file("people.csv")
    while tok.has_more():
        name = tok.get_string()
        age = tok.get_int()
        print(f"{name} ({age}) at row {tok.row}")

API:
    Tokenizer(text) / Tokenizer.from_file(path) / Tokenizer.from_bytes(data)
    read_file(path) -> str
    read_bytes(data) -> str
    detect_encoding(data) -> str
    parse_all(tokenizer, factory) -> Iterator[CSVParsable]
"""

from __future__ import annotations

from .coercions import parse_bool, parse_float, parse_integer
from .cursor import Tokenizer
from .encoding import detect_encoding, read_bytes, read_file
from .errors import (
    EmptyFieldError,
    InputTooLargeError,
    InvalidBooleanError,
    Location,
    NumericFormatError,
    Severity,
    TokenizerError,
    TokenizerIssue,
    UnterminatedQuoteError,
)
from .models import FieldType, Position, QuoteState
from .parsable import CSVParsable, RecordValues, TypedRecord, parse_all

# =============================================================================
# Public API Exports
# =============================================================================

__all__ = [
    "CSVParsable",
    "EmptyFieldError",
    # Enums
    "FieldType",
    "InputTooLargeError",
    "InvalidBooleanError",
    "Location",
    "NumericFormatError",
    # Models
    "Position",
    "QuoteState",
    "RecordValues",
    "Severity",
    # Main types
    "Tokenizer",
    "TokenizerError",
    "TokenizerIssue",
    "TypedRecord",
    "UnterminatedQuoteError",
    "detect_encoding",
    "parse_all",
    "parse_bool",
    "parse_float",
    "parse_integer",
    "read_bytes",
    "read_file",
]
