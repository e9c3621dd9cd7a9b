"""
Tokenizer error models.

Exceptions raised by field extraction and typed accessors, plus a structured
issue model used for reporting. All codes follow the CSV-XXX-NNN taxonomy.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .models import Position


class Severity(Enum):
    """Issue severity levels."""

    FATAL = "fatal"  # Cannot continue tokenizing
    ERROR = "error"  # Field could not be read
    WARN = "warn"  # Field skipped, tokenizing continued
    INFO = "info"  # Informational


class Location(BaseModel, frozen=True):
    """Issue location in the input."""

    file: str | None = None
    row: int | None = None
    column: int | None = None
    offset: int | None = None

    def __str__(self) -> str:
        """Format location for display."""
        parts = []
        if self.file:
            parts.append(self.file)
        if self.row is not None:
            parts.append(f"row {self.row}")
        if self.column is not None:
            parts.append(f"col {self.column}")
        return ", ".join(parts) if parts else "<unknown>"


class TokenizerIssue(BaseModel, frozen=True):
    """
    Structured tokenizer issue.

    Error domains:
    - CSV-FIELD-*: Field extraction errors
    - CSV-QUOTE-*: Quote balancing errors
    - CSV-NUM-*: Numeric coercion errors
    - CSV-BOOL-*: Boolean coercion errors
    - CSV-IO-*: Input errors
    """

    code: str = Field(
        pattern=r"^CSV-[A-Z]{2,5}-\d{3}$",
        description="Error code, e.g., 'CSV-FIELD-001'",
    )
    severity: Severity
    title: str = Field(description="Short error title")
    message: str = Field(description="Detailed error message")
    location: Location = Field(
        default_factory=Location,
        description="Where the error occurred",
    )
    context: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional context (raw_value, target, etc.)",
    )

    def __str__(self) -> str:
        """Format issue for display."""
        return f"[{self.code}] {self.severity.value.upper()}: {self.title} - {self.message}"


# =============================================================================
# Exceptions
# =============================================================================


class TokenizerError(Exception):
    """Base class for all tokenizer failures."""

    code = "CSV-FIELD-000"
    title = "Tokenizer error"

    def __init__(self, message: str, position: Position | None = None) -> None:
        self.message = message
        self.position = position or Position()
        super().__init__(f"Row {self.position.row}, column {self.position.column}: {message}")

    @property
    def row(self) -> int:
        return self.position.row

    @property
    def column(self) -> int:
        return self.position.column

    def context(self) -> dict[str, Any]:
        """Extra values attached to the structured issue."""
        return {}

    def to_issue(
        self,
        severity: Severity = Severity.ERROR,
        *,
        file: str | None = None,
    ) -> TokenizerIssue:
        """Convert this exception into a structured issue."""
        return TokenizerIssue(
            code=self.code,
            severity=severity,
            title=self.title,
            message=self.message,
            location=Location(
                file=file,
                row=self.position.row,
                column=self.position.column,
                offset=self.position.cursor,
            ),
            context=self.context(),
        )


class EmptyFieldError(TokenizerError):
    """Nothing left to read, or the extracted field is blank."""

    code = "CSV-FIELD-001"
    title = "Empty field"


class UnterminatedQuoteError(TokenizerError):
    """Input ended while still inside a quoted region."""

    code = "CSV-QUOTE-001"
    title = "Unterminated quote"


class NumericFormatError(TokenizerError, ValueError):
    """Field text is not a valid number for the requested width."""

    code = "CSV-NUM-001"
    title = "Invalid number"

    def __init__(self, text: str, target: str, position: Position | None = None) -> None:
        self.text = text
        self.target = target
        super().__init__(f"Cannot parse {text!r} as {target}", position)

    def context(self) -> dict[str, Any]:
        return {"raw_value": self.text, "target": self.target}


class InvalidBooleanError(TokenizerError, ValueError):
    """Field text is not one of the recognized boolean literals."""

    code = "CSV-BOOL-001"
    title = "Invalid boolean"

    def __init__(self, text: str, position: Position | None = None) -> None:
        self.text = text
        super().__init__(f"Invalid boolean value: {text!r}", position)

    def context(self) -> dict[str, Any]:
        return {"raw_value": self.text, "expected": ["true", "false", "1", "0"]}


class InputTooLargeError(TokenizerError):
    """Input exceeds the configured size limit."""

    code = "CSV-IO-001"
    title = "Input too large"

    def __init__(self, max_bytes: int, size: int | None = None) -> None:
        self.max_bytes = max_bytes
        self.size = size
        super().__init__(f"Input exceeds maximum size of {max_bytes} bytes")

    def context(self) -> dict[str, Any]:
        return {"max_bytes": self.max_bytes, "file_size": self.size}


# =============================================================================
# Error Codes Registry
# =============================================================================

TOKENIZER_ERROR_CODES: dict[str, str] = {
    "CSV-FIELD-001": "Empty field or no more data",
    "CSV-QUOTE-001": "Unexpected end of input in quoted field",
    "CSV-NUM-001": "Invalid or out-of-range number",
    "CSV-BOOL-001": "Invalid boolean literal",
    "CSV-IO-001": "Input too large",
}


def get_error_description(code: str) -> str | None:
    """Get the description for an error code."""
    return TOKENIZER_ERROR_CODES.get(code)
