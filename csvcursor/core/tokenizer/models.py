"""
Tokenizer data models.

Small value types shared by the tokenizer, its errors and its callers.
"""

from __future__ import annotations

from enum import Enum, auto

from pydantic import BaseModel, Field

# =============================================================================
# Constants
# =============================================================================

DELIMITER = ","
QUOTECHAR = '"'
NEWLINE = "\n"


# =============================================================================
# Enums
# =============================================================================


class QuoteState(Enum):
    """State of the field extraction state machine."""

    IDLE = auto()  # Delimiters and newlines are structural
    IN_QUOTE = auto()  # Inside an open quoted region


class FieldType(Enum):
    """Typed accessor kinds."""

    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BOOL = "bool"

    @classmethod
    def parse_list(cls, value: str) -> list[FieldType]:
        """
        Parse a comma-separated list of type names.

        Raises:
            ValueError: If a name is not a known field type
        """
        names = [part.strip().lower() for part in value.split(",")]
        return [cls(name) for name in names if name]


# =============================================================================
# Position
# =============================================================================


class Position(BaseModel, frozen=True):
    """Snapshot of a tokenizer's cursor and logical position."""

    cursor: int = Field(default=0, ge=0)
    row: int = Field(default=1, ge=1)
    column: int = Field(default=1, ge=1)

    def __str__(self) -> str:
        return f"row {self.row}, col {self.column}"
