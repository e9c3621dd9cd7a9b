"""
Whole-input scans used by the CLI.

Drives a Tokenizer over its full buffer and collects fields or typed records
together with structured issues. This is where the skip-and-continue policy
for blank fields lives; the tokenizer itself never recovers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

from csvcursor.core.tokenizer import (
    EmptyFieldError,
    Severity,
    TokenizerError,
    TokenizerIssue,
    TypedRecord,
    UnterminatedQuoteError,
    parse_all,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from csvcursor.core.tokenizer import FieldType, Tokenizer


class FieldEntry(BaseModel, frozen=True):
    """One extracted field and where it was found."""

    row: int = Field(ge=1)
    column: int = Field(ge=1)
    value: str


class RecordEntry(BaseModel, frozen=True):
    """One typed record."""

    row: int = Field(ge=1)
    values: list[Any]


class ScanResult(BaseModel):
    """Outcome of scanning an input."""

    file: str | None = None
    fields: list[FieldEntry] = Field(default_factory=list)
    records: list[RecordEntry] = Field(default_factory=list)
    issues: list[TokenizerIssue] = Field(default_factory=list)

    @property
    def severities(self) -> list[Severity]:
        return [issue.severity for issue in self.issues]

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)


def scan_fields(tokenizer: Tokenizer, file: str | None = None) -> ScanResult:
    """
    Extract every field of the input.

    Blank fields are reported as warnings and skipped. An unterminated quote
    is fatal and stops the scan.
    """
    result = ScanResult(file=file)

    while tokenizer.has_more():
        try:
            value = tokenizer.extract_field()
        except UnterminatedQuoteError as e:
            result.issues.append(e.to_issue(Severity.FATAL, file=file))
            break
        except EmptyFieldError as e:
            result.issues.append(e.to_issue(Severity.WARN, file=file))
            continue

        result.fields.append(FieldEntry(row=tokenizer.row, column=tokenizer.column, value=value))

    return result


def scan_records(
    tokenizer: Tokenizer,
    types: Sequence[FieldType],
    file: str | None = None,
) -> ScanResult:
    """
    Parse every record with the given field types.

    Any tokenizer error is reported and ends the scan.
    """
    result = ScanResult(file=file)

    try:
        for record in parse_all(tokenizer, lambda: TypedRecord(types)):
            model = record.to_model()
            result.records.append(RecordEntry(row=model.row, values=model.values))
    except UnterminatedQuoteError as e:
        result.issues.append(e.to_issue(Severity.FATAL, file=file))
    except TokenizerError as e:
        result.issues.append(e.to_issue(Severity.ERROR, file=file))

    return result
