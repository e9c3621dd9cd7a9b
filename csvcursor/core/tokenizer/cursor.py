"""
Cursor-driven CSV field tokenizer.

The tokenizer walks an immutable text buffer and hands out one field per
call. The dialect is fixed:
- Delimiter: comma (,)
- Quote character: double quote (")
- Escape: doubled quotes ("")
- Line terminator: LF (\n), literal inside quoted fields

A field's trailing delimiter is left in place and consumed at the start of
the next extraction, which is when the column (or row) counter advances.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .coercions import parse_bool, parse_float, parse_integer
from .encoding import read_bytes, read_file
from .errors import EmptyFieldError, UnterminatedQuoteError
from .models import DELIMITER, NEWLINE, QUOTECHAR, FieldType, Position, QuoteState

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

ACCESSORS: dict[FieldType, str] = {
    FieldType.SHORT: "get_short",
    FieldType.INT: "get_int",
    FieldType.LONG: "get_long",
    FieldType.FLOAT: "get_float",
    FieldType.DOUBLE: "get_double",
    FieldType.STRING: "get_string",
    FieldType.BOOL: "get_bool",
}


class Tokenizer:
    """Stateful cursor over CSV text."""

    def __init__(self, text: str = "") -> None:
        self._text = text
        # Index just past the last non-whitespace character
        self._content_end = len(text.rstrip())
        self._cursor = 0
        self._row = 1
        self._column = 1
        # Scratch buffer for the field being built, reused across calls
        self._buffer: list[str] = []

    @classmethod
    def from_bytes(cls, data: bytes, encoding: str | None = None) -> Tokenizer:
        """Create a tokenizer from raw bytes, detecting the encoding if needed."""
        return cls(read_bytes(data, encoding))

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        encoding: str | None = None,
        *,
        max_bytes: int | None = None,
    ) -> Tokenizer:
        """Create a tokenizer from the whole content of a file."""
        return cls(read_file(path, encoding, max_bytes=max_bytes))

    # =========================================================================
    # Position queries
    # =========================================================================

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    def position(self) -> Position:
        """Snapshot of cursor, row and column."""
        return Position(cursor=self._cursor, row=self._row, column=self._column)

    def set_text(self, text: str) -> None:
        """Replace the buffer and reset the position counters."""
        self._text = text
        self._content_end = len(text.rstrip())
        self.reset()
        logger.debug("buffer replaced (%d chars)", len(text))

    def reset(self) -> None:
        """Reset cursor, row and column; the buffer is kept."""
        self._cursor = 0
        self._row = 1
        self._column = 1

    def is_at_end(self) -> bool:
        return self._cursor >= len(self._text)

    def has_more(self) -> bool:
        """Check whether anything but whitespace remains after the cursor."""
        return self._cursor < self._content_end

    def peek_next(self) -> str | None:
        """
        Return the character after the cursor without moving.

        Returns:
            The next character, or None if the cursor is on the last
            character or past the end
        """
        if self._cursor + 1 >= len(self._text):
            return None
        return self._text[self._cursor + 1]

    # =========================================================================
    # Field extraction
    # =========================================================================

    def extract_field(self) -> str:
        """
        Extract the next field and advance past it.

        Returns:
            Field text, unquoted, unescaped and stripped of surrounding whitespace

        Raises:
            EmptyFieldError: If no data is left or the field is blank
            UnterminatedQuoteError: If input ends inside a quoted region
        """
        text = self._text
        buffer = self._buffer
        buffer.clear()
        state = QuoteState.IDLE

        while self._cursor < len(text):
            char = text[self._cursor]
            next_char = self.peek_next()

            if char == QUOTECHAR:
                if state == QuoteState.IDLE:
                    state = QuoteState.IN_QUOTE
                elif next_char == QUOTECHAR:
                    # Escaped quote
                    buffer.append(QUOTECHAR)
                    self._cursor += 1
                else:
                    state = QuoteState.IDLE

            elif state == QuoteState.IN_QUOTE:
                buffer.append(char)

            elif char == DELIMITER:
                # Delimiter left behind by the previous field
                self._column += 1

            elif char == NEWLINE:
                self._column = 1
                self._row += 1

            else:
                buffer.append(char)

            self._cursor += 1

            if state == QuoteState.IDLE and next_char in (DELIMITER, NEWLINE):
                break

        value = "".join(buffer).strip()
        buffer.clear()

        if not value:
            logger.debug("empty field at %s", self.position())
            raise EmptyFieldError("No more data to read from the CSV text", self.position())

        if state == QuoteState.IN_QUOTE:
            logger.debug("unclosed quote at %s", self.position())
            raise UnterminatedQuoteError("Unclosed quote in CSV text", self.position())

        return value

    # =========================================================================
    # Typed accessors
    # =========================================================================

    def get_string(self) -> str:
        return self.extract_field()

    def get_short(self) -> int:
        """Get the next field as a signed 16-bit integer."""
        return parse_integer(self.extract_field(), "short", self.position())

    def get_int(self) -> int:
        """Get the next field as a signed 32-bit integer."""
        return parse_integer(self.extract_field(), "int", self.position())

    def get_long(self) -> int:
        """Get the next field as a signed 64-bit integer."""
        return parse_integer(self.extract_field(), "long", self.position())

    def get_float(self) -> float:
        """Get the next field as a single precision float."""
        return parse_float(self.extract_field(), "float", self.position())

    def get_double(self) -> float:
        """Get the next field as a double precision float."""
        return parse_float(self.extract_field(), "double", self.position())

    def get_bool(self) -> bool:
        """
        Get the next field as a boolean.

        Accepts "true"/"1" and "false"/"0", case-insensitive.

        Raises:
            InvalidBooleanError: For any other value
        """
        return parse_bool(self.extract_field(), self.position())

    def get(self, field_type: FieldType) -> int | float | str | bool:
        """Get the next field converted to the given type."""
        return getattr(self, ACCESSORS[field_type])()
